"""
Reference vocabulary for the Porter stemmer.

Martin Porter publishes a vocabulary of about 23,000 words together with
the stem the algorithm should produce for each of them:

    https://tartarus.org/martin/PorterStemmer/voc.txt
    https://tartarus.org/martin/PorterStemmer/output.txt

The two lists are downloaded on first use and cached, by default under
~/.cache/porterstem; set PORTERSTEM_DATA to keep them somewhere else.
"""

import logging
import os
import tempfile
from collections import namedtuple
from pathlib import Path

import requests

from porterstem.porter import PorterStemmer

logger = logging.getLogger(__name__)

VOCABULARY_URL = "https://tartarus.org/martin/PorterStemmer/voc.txt"
OUTPUT_URL = "https://tartarus.org/martin/PorterStemmer/output.txt"

DATA_ENV_VAR = "PORTERSTEM_DATA"
DEFAULT_DATA_DIR = Path.home() / ".cache" / "porterstem"

DOWNLOAD_TIMEOUT = 30


Mismatch = namedtuple("Mismatch", ["word", "expected", "actual"])


class CorpusError(Exception):
    """The reference corpus could not be fetched or read."""


def data_dir():
    """Directory the reference corpus is cached in."""
    return Path(os.environ.get(DATA_ENV_VAR) or DEFAULT_DATA_DIR)


def _filename(url):
    return url.rsplit("/", 1)[-1]


def download(url, destination, session=None, timeout=DOWNLOAD_TIMEOUT):
    """
    Download `url` to `destination` and return the destination path.

    The body is written to a temporary file next to the destination and
    renamed into place, so an interrupted download never leaves a
    truncated file behind.

    Raises:
        CorpusError: the request failed or returned an error status
    """
    destination = Path(destination)
    http = session or requests

    logger.info("Downloading %s to %s", url, destination)
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise CorpusError("could not download %s: %s" % (url, exc)) from exc

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=str(destination.parent), suffix=".part")
    except OSError as exc:
        raise CorpusError("could not create %s: %s" % (destination, exc)) from exc

    try:
        with os.fdopen(fd, "wb") as fout:
            fout.write(response.content)
        os.replace(tmp_name, str(destination))
    except OSError as exc:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CorpusError("could not write %s: %s" % (destination, exc)) from exc

    logger.debug("Wrote %d bytes to %s", len(response.content), destination)
    return destination


def ensure_corpus(directory=None, session=None):
    """
    Return (vocabulary_path, output_path), downloading missing files.
    """
    directory = Path(directory) if directory is not None else data_dir()

    paths = []
    for url in (VOCABULARY_URL, OUTPUT_URL):
        path = directory / _filename(url)
        if path.exists():
            logger.debug("Using cached %s", path)
        else:
            download(url, path, session=session)
        paths.append(path)

    return tuple(paths)


def read_words(path):
    """Whitespace separated words of the file at `path`."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().split()
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError("could not read %s: %s" % (path, exc)) from exc


def load_corpus(directory=None, session=None):
    """
    Load the reference corpus as a list of (word, expected_stem) pairs.

    Raises:
        CorpusError: a file is missing and could not be downloaded, or the
            two lists are not the same length
    """
    vocabulary_path, output_path = ensure_corpus(directory, session=session)
    words = read_words(vocabulary_path)
    stems = read_words(output_path)

    if len(words) != len(stems):
        raise CorpusError(
            "%s has %d words but %s has %d stems"
            % (vocabulary_path, len(words), output_path, len(stems))
        )

    logger.debug("Loaded %d reference words", len(words))
    return list(zip(words, stems))


def verify(pairs, stemmer=None):
    """
    Stem every word of `pairs` and return the ones that come out wrong.

    Args:
        pairs: iterable of (word, expected_stem)
        stemmer: stemmer to check, a new PorterStemmer by default

    Returns:
        List of Mismatch tuples, empty when every stem matches
    """
    stemmer = stemmer or PorterStemmer()

    mismatches = []
    for word, expected in pairs:
        actual = stemmer.stem(word)
        if actual != expected:
            logger.debug("%s should stem to %s but got %s", word, expected, actual)
            mismatches.append(Mismatch(word, expected, actual))

    return mismatches
