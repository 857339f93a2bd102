"""postagger - Part-of-speech tagging by fusing per-token tag distributions."""

__version__ = "0.1.0"

from .config import Config, ModelConfig, OutputConfig, TaggingConfig
from .errors import FatalModelError, OracleContractViolation, TaggerError
from .models import UNRESOLVED, SentenceResult, Tag, Token
from .pipeline import TaggingPipeline, build_oracles

__all__ = [
    "Config",
    "ModelConfig",
    "OutputConfig",
    "TaggingConfig",
    "FatalModelError",
    "OracleContractViolation",
    "TaggerError",
    "UNRESOLVED",
    "SentenceResult",
    "Tag",
    "Token",
    "TaggingPipeline",
    "build_oracles",
]
