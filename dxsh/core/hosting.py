"""
HTTP hosting for generated scripts: GET /{tool} returns the installer as text.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from flask import Blueprint, Flask, Response, current_app, request

from ..config.settings import Settings
from . import registry
from .errors import ClientError, DxshError, UnsupportedTool
from .generator import ScriptGenerator


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Max-Age": "86400",
}


@dataclass
class ScriptResponse:
    """Status, headers and body for one HTTP response."""
    status: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)


def _text_headers() -> Dict[str, str]:
    return {"Content-Type": "text/plain; charset=utf-8", **CORS_HEADERS}


async def handle_tool_request(tool: str,
                              generator: ScriptGenerator,
                              cache_max_age: int = 300) -> ScriptResponse:
    """
    Map a tool request to a response.

    Unsupported tools and tools without a matching asset yield 404, with the
    list of supported tools. Every other failure yields 500 with its message.
    """
    logger = logging.getLogger(__name__)
    supported = ", ".join(registry.list_supported_names())

    if not registry.is_supported(tool):
        return ScriptResponse(
            status=404,
            body=f"{UnsupportedTool(tool)}. Supported tools: {supported}\n",
            headers=_text_headers()
        )

    try:
        script = await generator.generate(tool)
    except ClientError as e:
        logger.warning(f"Cannot generate script for {tool}: {e}")
        return ScriptResponse(
            status=404,
            body=f"{e}. Supported tools: {supported}\n",
            headers=_text_headers()
        )
    except DxshError as e:
        logger.error(f"Error generating script for {tool}: {e}")
        return ScriptResponse(status=500, body=f"{e}\n", headers=_text_headers())
    except Exception as e:
        logger.exception(f"Unexpected failure generating script for {tool}")
        return ScriptResponse(
            status=500,
            body=f"Failed to generate install script: {e}\n",
            headers=_text_headers()
        )

    headers = _text_headers()
    headers["Cache-Control"] = f"public, max-age={cache_max_age}"
    return ScriptResponse(status=200, body=script, headers=headers)


def handle_options() -> ScriptResponse:
    """CORS preflight response."""
    return ScriptResponse(status=204, headers=dict(CORS_HEADERS))


scripts_bp = Blueprint("scripts", __name__)


def _to_flask(response: ScriptResponse) -> Response:
    return Response(response.body, status=response.status, headers=response.headers)


@scripts_bp.route("/<tool>", methods=["GET", "OPTIONS"])
def tool_script(tool: str):  # type: ignore[no-untyped-def]
    """Install script for one tool, or the CORS preflight for it."""
    if request.method == "OPTIONS":
        return _to_flask(handle_options())

    response = asyncio.run(handle_tool_request(
        tool,
        current_app.config["SCRIPT_GENERATOR"],
        current_app.config["CACHE_MAX_AGE"]
    ))
    return _to_flask(response)


def create_app(settings: Optional[Settings] = None,
               generator: Optional[ScriptGenerator] = None) -> Flask:
    """
    Create the Flask application serving GET /<tool>.

    Args:
        settings: Application settings (defaults to environment and .env)
        generator: Script generator (defaults to one built from settings)

    Returns:
        Configured Flask application
    """
    settings = settings or Settings()

    app = Flask(__name__)
    app.config["SCRIPT_GENERATOR"] = generator or ScriptGenerator(settings=settings)
    app.config["CACHE_MAX_AGE"] = settings.server.cache_max_age
    app.register_blueprint(scripts_bp)

    logging.getLogger(__name__).info("Script server app created")
    return app


def serve(settings: Optional[Settings] = None,
          generator: Optional[ScriptGenerator] = None) -> None:
    """Serve scripts until interrupted."""
    settings = settings or Settings()
    app = create_app(settings, generator)

    logging.getLogger(__name__).info(
        f"Serving install scripts on http://{settings.server.host}:{settings.server.port}/"
    )
    app.run(host=settings.server.host, port=settings.server.port, debug=False, use_reloader=False)
