import locale
import logging
from typing import List, Optional
from urllib.parse import urlparse

from requests.exceptions import RequestException
from requests.models import PreparedRequest

from .errors import InvalidUrlError, MissingConfigurationError
from .types import AppContext

logger = logging.getLogger(__name__)

VERSION_PLACEHOLDER = "__VERSION__"
LANGUAGE_PLACEHOLDER = "__LANGUAGE__"


def system_languages() -> List[str]:
    """Preferred languages of the current process, best first."""
    lang: Optional[str] = None
    try:
        lang = locale.getlocale()[0]
    except ValueError:
        lang = None
    if not lang or lang in ("C", "POSIX"):
        return []
    return [lang.split(".")[0].replace("_", "-")]


def system_app_context(version: str) -> AppContext:
    return AppContext(version=version, languages=system_languages())


def assemble_url(template: Optional[str], context: AppContext) -> str:
    """Replace the placeholders of ``template`` with the values of ``context``.

    Placeholders:
      - ``__VERSION__``: the version of the application
      - ``__LANGUAGE__``: the preferred language of the user

    Example::

        http://www.example.com/news.php?version=__VERSION__&language=__LANGUAGE__

    becomes ``http://www.example.com/news.php?version=1.0.1&language=de``
    for version 1.0.1 on a German system.
    """
    if not template:
        raise MissingConfigurationError()

    url = template.replace(VERSION_PLACEHOLDER, context.version)
    url = url.replace(LANGUAGE_PLACEHOLDER, context.language)
    _check_url(url)
    return url


def _check_url(url: str) -> None:
    scheme = urlparse(url).scheme.lower()
    if scheme not in ("http", "https"):
        raise InvalidUrlError(url, "http or https url expected")
    try:
        PreparedRequest().prepare_url(url, None)
    except (RequestException, ValueError) as e:
        logger.debug("Rejecting url %s: %s", url, e)
        raise InvalidUrlError(url, str(e)) from e
