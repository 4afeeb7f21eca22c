from .config import PreprocessorConfig, merge_into_preprocessor_config
from .preprocessor import PreprocessResult, Preprocessor, preprocess_text

__all__ = [
    "PreprocessResult",
    "Preprocessor",
    "PreprocessorConfig",
    "merge_into_preprocessor_config",
    "preprocess_text",
]
