"""udconllu: parsing CoNLL-U dependency treebanks."""

# Symbols that need to be seen outside this package.

from .documents import (  # noqa: F401
    Doc,
    parse_file,
    parse_from_path,
    parse_from_string,
)
from .errors import (  # noqa: F401
    DepsError,
    Error,
    FeatureError,
    FieldCountError,
    TokenIDError,
    UPOSError,
)
from .fields import Dep  # noqa: F401
from .ids import Range, Single, Sub, TokenID, parse_id  # noqa: F401
from .sentences import Sentence, SentenceBuilder, parse_sentence  # noqa: F401
from .tokens import Token, TokenBuilder, parse_token  # noqa: F401
from .upos import UPOS  # noqa: F401
