from pookalam.renderers.pookalam.controls import PookalamControls  # noqa: F401
from pookalam.renderers.pookalam.provider import \
    PookalamStateProvider  # noqa: F401
from pookalam.renderers.pookalam.renderer import PookalamScene  # noqa: F401
from pookalam.renderers.pookalam.state import PookalamState  # noqa: F401
