from pookalam.assets.loader import Loader  # noqa: F401
