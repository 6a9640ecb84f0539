"""Minimum enclosing balls of point sets."""

from ._ball import EnclosingBall as EnclosingBall
from ._ball import export_ball_to_json as export_ball_to_json
from ._config import EncloserConfig as EncloserConfig
from ._config import TolerancePreset as TolerancePreset
from ._encloser import WelzlEncloser as WelzlEncloser
from ._encloser import enclose as enclose
from ._errors import DegenerateSupportError as DegenerateSupportError
from ._errors import EnclosingBallError as EnclosingBallError
from ._errors import EnclosingError as EnclosingError
from ._errors import SupportSizeError as SupportSizeError
from ._generators import DiskGenerator as DiskGenerator
from ._generators import SphereGenerator as SphereGenerator
from ._generators import SupportBallGenerator as SupportBallGenerator
from ._generators import generator_for_dimension as generator_for_dimension
from ._tolerance import Tolerance as Tolerance

__version__ = "0.0.0"
