from pookalam.patterns.basis import BasisFunction, evaluate  # noqa: F401
from pookalam.patterns.composer import (FractalPookalam, Layer,  # noqa: F401
                                        Point, RingPookalam, compose)
from pookalam.patterns.parameters import (PRESETS,  # noqa: F401
                                          GenerationParameters,
                                          morph_parameters)
from pookalam.patterns.rng import Mulberry32  # noqa: F401
from pookalam.patterns.sampler import (PointSequence, Segment,  # noqa: F401
                                       ViewBounds, sample)
