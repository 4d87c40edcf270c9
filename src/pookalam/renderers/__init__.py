from pookalam.renderers.atomic import AtomicBaseRenderer  # noqa: F401
from pookalam.renderers.stateful import StatefulBaseRenderer  # noqa: F401
