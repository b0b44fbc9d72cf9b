"""Application initialization."""

from typing import Any

from flask import Flask, Response, jsonify, request

from icsinvite.config.settings import IcsSettings
from icsinvite.exceptions import IcsInviteError, InvalidEventError, ParseError
from icsinvite.models.event import EventRecord
from icsinvite.services.calendar.delivery import FlaskOutput
from icsinvite.utils.logging_utils import get_logger

logger = get_logger(__name__)


def create_app(settings: IcsSettings | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    settings = settings or IcsSettings()
    app.config['ICS_SETTINGS'] = settings

    @app.get('/health')
    def health() -> Any:
        return jsonify({'status': 'healthy'})

    @app.post('/invite')
    def invite() -> Any:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        filename = str(payload.pop('filename', '') or '')
        try:
            record = EventRecord(payload, settings=settings)
            output = FlaskOutput(Response(status=200))
            record.download(output, filename)
        except (ParseError, InvalidEventError) as e:
            logger.warning(f"Rejected invite request: {e}")
            return jsonify({'error': e.message, 'details': e.details}), 400
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

        return output.response

    @app.errorhandler(IcsInviteError)
    def handle_invite_error(e: IcsInviteError) -> Any:
        logger.error(f"Unhandled invite error: {e}")
        return jsonify({'error': e.message, 'code': e.code.value}), 500

    return app
