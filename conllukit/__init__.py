"""
conllukit: round-trip CoNLL-U sentences and edit their multiword tokens.

Parses sentence blocks into Tokens, MultiwordTokens and metadata, serializes
them back losslessly, and expands/collapses multiword tokens while keeping
token ids contiguous.
"""

__version__ = "1.0.0"

from conllukit.config import ConllukitConfig
from conllukit.conllu import conllu_to_sentences, read_conllu, sentences_to_conllu, write_conllu
from conllukit.errors import ConlluError, MalformedGroupError, MalformedLineError, NotFoundError
from conllukit.multiword import MultiwordToken
from conllukit.sentence import Sentence
from conllukit.token import Token

__all__ = [
    'ConllukitConfig',
    'ConlluError',
    'MalformedGroupError',
    'MalformedLineError',
    'MultiwordToken',
    'NotFoundError',
    'Sentence',
    'Token',
    'conllu_to_sentences',
    'read_conllu',
    'sentences_to_conllu',
    'write_conllu',
    '__version__',
]
