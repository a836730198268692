import unittest
from unittest.mock import Mock, patch

import requests

from app import main


def _response(status_code: int, text: str = "") -> Mock:
    response = Mock(status_code=status_code, encoding="utf-8")
    response.iter_content.return_value = [text.encode("utf-8")] if text else []
    return response


class StatusPageEndpointTests(unittest.TestCase):
    def test_all_checks_healthy(self) -> None:
        with patch(
            "app.checks.http_check.requests.request",
            side_effect=[_response(200, "OK"), _response(200), _response(204)],
        ):
            resp = main.status_page()

        page = resp.body.decode("utf-8")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "text/html; charset=UTF-8")
        self.assertEqual(page.count("status-item status-healthy"), 3)
        self.assertIn("<code>OK</code>", page)

    def test_upstream_500_is_shown_but_page_is_200(self) -> None:
        with patch(
            "app.checks.http_check.requests.request",
            side_effect=[_response(200, "OK"), _response(500), _response(200)],
        ):
            resp = main.status_page()

        page = resp.body.decode("utf-8")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("❌ Error: 500", page)

    def test_connection_refused_still_renders(self) -> None:
        with patch(
            "app.checks.http_check.requests.request",
            side_effect=requests.ConnectionError("Connection refused"),
        ):
            resp = main.status_page()

        page = resp.body.decode("utf-8")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(page.count("status-item status-error"), 3)
        self.assertNotIn("Health Response", page)

    def test_openapi_lists_status_page(self) -> None:
        schema = main.app.openapi()
        self.assertIn("/", schema["paths"])

    def test_run_configures_logging_and_serves_app(self) -> None:
        with patch("app.main.logging.basicConfig") as basic_config, patch(
            "app.main.uvicorn.run"
        ) as uvicorn_run:
            main.run()

        self.assertEqual(basic_config.call_args.kwargs["level"], main.settings.LOG_LEVEL)
        uvicorn_run.assert_called_once_with(
            main.app,
            host=main.settings.HOST,
            port=main.settings.PORT,
            log_level=main.settings.LOG_LEVEL.lower(),
        )


if __name__ == "__main__":
    unittest.main()
