"""
Input Provider - Resolve a day's puzzle input

Inputs are cached under ``input/{year}/day{DD}.txt``.  A cached file is
returned verbatim and never re-fetched; otherwise the input is downloaded
with the account's session cookie and written to the cache.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import httpx

from .config import Settings, settings as default_settings
from .exceptions import ConfigurationError, InputError, NetworkError
from ..utils.helpers import ensure_dir

logger = logging.getLogger(__name__)


class InputProvider:
    """Loads puzzle input from the local cache, downloading it when missing"""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None):
        self.settings = settings or default_settings
        self._client = client

    # ── paths ───────────────────────────────────────────

    def cache_path(self, year: int, day: int) -> Path:
        return self.settings.input_path / str(year) / f"day{day:02d}.txt"

    def sample_path(self, year: int, name: str) -> Path:
        return self.settings.input_path / str(year) / "sample" / name

    def input_url(self, year: int, day: int) -> str:
        return f"{self.settings.AOC_BASE_URL.rstrip('/')}/{year}/day/{day}/input"

    # ── lookup ──────────────────────────────────────────

    def get_input(self, year: int, day: int) -> str:
        """
        Return the puzzle input for *year*/*day*.

        Raises:
            ConfigurationError: nothing cached and no SESSION configured
            NetworkError: the download failed
            OSError: the cached file could not be read
            InputError: the cached file is not valid UTF-8
        """
        path = self.cache_path(year, day)
        if path.exists():
            logger.info(f"Using cached input from {path}")
            return _read_verbatim(path)

        token = self.settings.SESSION
        if not token:
            raise ConfigurationError(
                "You need to set the SESSION cookie (environment or .env file) "
                f"to download input for {year} day {day}"
            )
        return self._download(year, day, path, token)

    def get_sample_input(self, year: int, name: str) -> str:
        """Return a sample input file from ``input/{year}/sample/``"""
        path = self.sample_path(year, name)
        logger.info(f"Using sample input from {path}")
        return _read_verbatim(path)

    # ── download ────────────────────────────────────────

    @contextmanager
    def _http(self) -> Iterator[httpx.Client]:
        if self._client is not None:
            yield self._client
            return
        with httpx.Client(timeout=self.settings.REQUEST_TIMEOUT, follow_redirects=True) as client:
            yield client

    def _download(self, year: int, day: int, path: Path, token: str) -> str:
        url = self.input_url(year, day)
        logger.info("Downloading input data for %s day %s", year, day)

        chunks: List[str] = []
        cache = _CacheWriter(path)
        try:
            with self._http() as client:
                with client.stream("GET", url, headers={"Cookie": f"session={token}"}) as response:
                    if not response.is_success:
                        body = response.read().decode("utf-8", errors="replace")
                        raise NetworkError(
                            f"Connection status {response.status_code} downloading "
                            f"input for {year} day {day}",
                            status_code=response.status_code,
                            body=body,
                        )
                    for chunk in response.iter_text():
                        chunks.append(chunk)
                        cache.write(chunk)
        except httpx.HTTPError as exc:
            cache.discard()
            raise NetworkError(f"Could not download input for {year} day {day}: {exc}") from exc
        except BaseException:
            cache.discard()
            raise

        if cache.commit():
            logger.info(f"Input data saved to {path}")
        return "".join(chunks)


class _CacheWriter:
    """
    Writes a download to a temporary file beside *path* and renames it into
    place on commit.  Write failures are logged once and then ignored: the
    text already downloaded is still returned to the caller.
    """

    def __init__(self, path: Path):
        self.path = path
        self._handle = None
        self._tmp_name: Optional[str] = None
        self._failed = False

    def write(self, chunk: str) -> None:
        if self._failed:
            return
        try:
            if self._handle is None:
                ensure_dir(self.path.parent)
                fd, self._tmp_name = tempfile.mkstemp(
                    dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".part"
                )
                self._handle = os.fdopen(fd, "w", encoding="utf-8", newline="")
            self._handle.write(chunk)
        except OSError as exc:
            logger.warning("Could not cache input to %s: %s", self.path, exc)
            self._failed = True
            self.discard()

    def commit(self) -> bool:
        if self._failed:
            return False
        if self._handle is None:
            # empty body: still record it so it is not fetched again
            self.write("")
            if self._failed:
                return False
        try:
            self._handle.close()
            os.replace(self._tmp_name, self.path)
            return True
        except OSError as exc:
            logger.warning("Could not cache input to %s: %s", self.path, exc)
            self._failed = True
            self.discard()
            return False

    def discard(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError:
                pass
            self._handle = None
        if self._tmp_name and os.path.exists(self._tmp_name):
            try:
                os.unlink(self._tmp_name)
            except OSError as exc:
                logger.debug("Could not remove %s: %s", self._tmp_name, exc)
        self._tmp_name = None


def _read_verbatim(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise InputError(path, exc) from exc
