from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/upload-excel", methods=["POST"], endpoint="upload_excel")
    def upload_excel():
        """Replace all sessions with the rows of the uploaded spreadsheet."""

        file = request.files.get("file")
        if file is None or not file.filename:
            return jsonify({"error": "No file uploaded"}), 400

        try:
            result = container.import_service.import_file(file.stream, file.filename)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("import of %s failed: %s", file.filename, e)
            return jsonify({"error": str(e)}), 500

        return jsonify(result.to_dict())
