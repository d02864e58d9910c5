"""FastAPI integration for the i18n system.

Provides cookie-backed preference storage, a dependency resolving the
language of the current request, and a router with a language switch
endpoint.

Usage:
    from fastapi import FastAPI
    from infrastructure.i18n.web import RequestLanguageDep, create_language_router

    app = FastAPI()
    app.include_router(create_language_router())

    @app.get("/{path:path}")
    def page(language: RequestLanguageDep, translation: TranslationServiceDep):
        return {"title": translation.translate("home.title", language)}
"""

from typing import Annotated, Mapping, Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse, Response

from infrastructure.i18n.models import LanguageSignals
from infrastructure.i18n.storage import PreferenceStorage
from infrastructure.logging import bind_language_context, get_module_logger
from infrastructure.services.dependencies import SettingsDep, TranslationServiceDep

logger = get_module_logger()


class CookieStorage(PreferenceStorage):
    """Preference storage backed by HTTP cookies.

    Reads come from the request cookies. Writes update the local view and,
    when a response is attached, set the cookie on it.
    """

    def __init__(
        self,
        cookies: Mapping[str, str],
        response: Optional[Response] = None,
        max_age: Optional[int] = None,
    ):
        self.cookies = dict(cookies)
        self.response = response
        self.max_age = max_age

    def get(self, key: str) -> Optional[str]:
        return self.cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self.cookies[key] = value
        if self.response is not None:
            self.response.set_cookie(
                key=key,
                value=value,
                max_age=self.max_age,
                path="/",
                samesite="lax",
            )


def get_request_language(request: Request, translation: TranslationServiceDep) -> str:
    """Resolve the language of the current request.

    Uses the configured detection mode on the request path or query, then
    the preference cookie, then the default language.
    """
    signals = LanguageSignals(path=request.url.path, query=request.query_params)
    return translation.detect_language(signals, storage=CookieStorage(request.cookies))


RequestLanguageDep = Annotated[str, Depends(get_request_language)]


def _safe_next(next_url: str) -> str:
    """Restrict redirect targets to local paths."""
    if not next_url.startswith("/") or next_url.startswith(("//", "/\\")):
        return "/"
    return next_url


def create_language_router() -> APIRouter:
    """Create a router exposing GET /language/{language}.

    The endpoint stores the chosen language in a cookie and redirects (303)
    to the `next` URL in that language.
    """
    router = APIRouter(tags=["Language"])

    @router.get("/language/{language}")
    def switch_language(
        language: str,
        request: Request,
        translation: TranslationServiceDep,
        settings: SettingsDep,
        next_url: str = Query(default="/", alias="next"),
    ):
        if not translation.config.is_supported(language):
            logger.warning("unsupported_language_requested", language=language)
            raise HTTPException(status_code=404, detail=f"Unsupported language: {language}")

        target = _safe_next(next_url)
        current = translation.detector().resolve_from_path(urlsplit(target).path)
        redirect_url = translation.switch_url(target, language, current)

        response = RedirectResponse(url=redirect_url, status_code=303)
        storage = CookieStorage(
            request.cookies,
            response=response,
            max_age=settings.i18n.cookie_max_age_seconds,
        )
        with bind_language_context(language, previous_language=current):
            translation.set_language(language, storage)
            logger.info("language_switched", redirect_url=redirect_url)
        return response

    return router
