from .datatypes import DEFAULT_SENTINEL
from .datatypes import NormalizedText
from .datatypes import SentinelError

from .suffix_array import SuffixArray
from .suffix_array import build
from .suffix_array import create_rank_array
from .suffix_array import create_suffix_array
from .suffix_array import naive_suffix_array

from .utils import AttributeDict
from .utils import format_suffixes
from .utils import setup_logger
from .utils import str2bool

__version__ = "0.1.0"
