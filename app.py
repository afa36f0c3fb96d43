"""Flask web application for the 2-iron advisor."""

import logging
import os

from flask import Flask, jsonify, request

import config
from two_iron.questionnaire import questionnaire_to_dict
from two_iron.services.submission_service import GENERIC_FAILURE_MESSAGE, SubmissionService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Swapped out in tests
submission_service = SubmissionService()


@app.route('/health')
def health():
    """Liveness probe."""
    return jsonify({'status': 'ok'})


@app.route('/api/questionnaire')
def api_questionnaire():
    """Return the questionnaire sections for rendering."""
    return jsonify(questionnaire_to_dict())


@app.route('/api/submit', methods=['POST'])
def api_submit():
    """Score the submitted answers, email the result, and return it."""
    data = request.get_json(silent=True)

    try:
        result = submission_service.submit(data)
    except Exception as e:
        logger.exception("Error processing form submission: %s", e)
        return jsonify({'success': False, 'error': GENERIC_FAILURE_MESSAGE}), 500

    if not result.success:
        logger.error(
            "Error processing form submission: stage=%s error=%s",
            result.failed_stage.value if result.failed_stage else None,
            result.error,
        )
        return jsonify(result.to_dict()), 500

    return jsonify(result.to_dict())


if __name__ == '__main__':
    if not config.BREVO_API_KEY:
        print("Warning: BREVO_API_KEY environment variable not set")

    port = int(os.environ.get('PORT', 5000))
    app.run(debug=False, host='0.0.0.0', port=port)
