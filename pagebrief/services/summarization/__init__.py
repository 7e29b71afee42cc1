from .chunker import WordChunker, chunk_text
from .errors import (
    AllChunksTooShortError,
    ContentTooShortError,
    InvalidRequestError,
    MissingCredentialsError,
    ProviderCallError,
    ProviderError,
    SummarizationError,
    UnsupportedProviderError,
)
from .translator import ErrorKind, TranslatedError, translate_provider_error

__all__ = [
    "AllChunksTooShortError",
    "ContentTooShortError",
    "ErrorKind",
    "InvalidRequestError",
    "MissingCredentialsError",
    "ProviderCallError",
    "ProviderError",
    "SummarizationError",
    "TranslatedError",
    "UnsupportedProviderError",
    "WordChunker",
    "chunk_text",
    "translate_provider_error",
]
