"""Tests for svgpage.errors — exception hierarchy and error messages."""

from pathlib import Path

import pytest

from svgpage.errors import (
    AssetNotFound,
    ConfigurationError,
    HTTPError,
    MalformedSvg,
    MethodNotAllowed,
    NotFound,
    PageError,
    RenderFailure,
    SvgPageError,
)


class TestHierarchy:
    def test_http_error_is_svgpage_error(self) -> None:
        assert issubclass(HTTPError, SvgPageError)

    def test_configuration_error_is_svgpage_error(self) -> None:
        assert issubclass(ConfigurationError, SvgPageError)

    @pytest.mark.parametrize("cls", [MalformedSvg, AssetNotFound, RenderFailure])
    def test_page_failures_share_a_base(self, cls: type) -> None:
        assert issubclass(cls, PageError)
        assert not issubclass(cls, HTTPError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request")) == "400: Bad request"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_not_found_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_method_not_allowed_allow_header(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in err.detail


class TestPageErrors:
    def test_asset_not_found_carries_path_and_reason(self) -> None:
        reason = FileNotFoundError(2, "No such file or directory")
        err = AssetNotFound(Path("svg/home.svg"), reason)
        assert err.path == Path("svg/home.svg")
        assert err.reason is reason
        assert "svg/home.svg" in str(err)

    def test_render_failure_names_template(self) -> None:
        err = RenderFailure("layout.html", ValueError("boom"))
        assert err.template == "layout.html"
        assert "layout.html" in str(err)
        assert "boom" in str(err)
