"""Permissive CORS proxy that forwards generate requests to a local Ollama."""

from __future__ import annotations

import argparse
import json
from http import HTTPStatus

import requests
from flask import Flask, Response, jsonify, request

DEFAULT_UPSTREAM = "http://localhost:11434/api/generate"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def _allow_any_origin(response: Response) -> Response:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "*"
    response.headers["Access-Control-Expose-Headers"] = "*"
    return response


def create_app(upstream_url: str = DEFAULT_UPSTREAM) -> Flask:
    """Build the proxy application forwarding to ``upstream_url``."""
    app = Flask(__name__)
    app.after_request(_allow_any_origin)

    @app.route("/api/generate", methods=["POST"])
    def proxy_request():
        if not request.is_json:
            return Response(status=HTTPStatus.UNSUPPORTED_MEDIA_TYPE)
        try:
            body = json.loads(request.get_data())
        except ValueError:
            return Response(status=HTTPStatus.BAD_REQUEST)

        try:
            upstream = requests.post(upstream_url, json=body)
        except requests.RequestException:
            return Response(status=HTTPStatus.BAD_GATEWAY)
        if not upstream.ok:
            return Response(status=HTTPStatus.BAD_GATEWAY)

        try:
            payload = upstream.json()
        except ValueError:
            return Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)
        return jsonify(payload)

    return app


def main(argv: list[str] | None = None) -> None:
    """Run the proxy server."""
    parser = argparse.ArgumentParser(description="Forward generate requests to Ollama.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--upstream", default=DEFAULT_UPSTREAM)
    args = parser.parse_args(argv)
    app = create_app(args.upstream)
    print(f"Proxy server running on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()