"""
AI Readiness Assessment - Flask Web Application

JSON API that drives the assessment wizard. The server keeps no state:
each request rebuilds the session from the snapshot held in the client's
signed session cookie and writes the updated snapshot back.
"""

import os
import sys
import logging
from flask import Flask, request, jsonify, session
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import get_config
from ai_readiness.assessment import (
    AssessmentEngine,
    AssessmentError,
    AssessmentSession,
    InvalidSnapshot,
    OrganizationProfile,
    select_questions
)
from ai_readiness.assessment.questions import get_all_domains, get_domain_info, get_question_count
from ai_readiness.patterns.maturity_classification import MaturityClassifier

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = 'assessment'
INDEX_KEY = 'assessment_index'

# =============================================================================
# App Factory
# =============================================================================

def create_app(config_class=None):
    """Create Flask application"""
    app = Flask(__name__)

    # Load configuration
    if config_class is None:
        config_class = get_config()
    app.config.from_object(config_class)

    if not app.config.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY must be set in production")

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    # Rate limiting
    Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[app.config['RATELIMIT_DEFAULT']],
        storage_uri=app.config['RATELIMIT_STORAGE_URL']
    )

    engine = AssessmentEngine(impact_seed=app.config.get('ASSESSMENT_IMPACT_SEED'))
    retain_answered = app.config.get('ASSESSMENT_RETAIN_ANSWERED', True)
    classifier = MaturityClassifier()

    def _load_session():
        """Rebuild the assessment session from the cookie snapshot"""
        snapshot = session.get(SNAPSHOT_KEY) or {}
        try:
            assessment = AssessmentSession.from_snapshot(
                snapshot, engine=engine, retain_answered=retain_answered
            )
        except InvalidSnapshot as e:
            logger.warning(f"Discarding unusable assessment snapshot: {e}")
            assessment = AssessmentSession(engine=engine, retain_answered=retain_answered)

        assessment.go_to(session.get(INDEX_KEY, 0))
        return assessment

    def _save_session(assessment):
        """Store the snapshot; the result is recomputed on load to keep the cookie small"""
        snapshot = assessment.to_snapshot()
        snapshot['result'] = None
        session[SNAPSHOT_KEY] = snapshot
        session[INDEX_KEY] = assessment.current_index
        session.permanent = True

    def _state_payload(assessment):
        current = assessment.current_question
        return {
            'state': assessment.state.value,
            'profile': assessment.profile.to_dict() if assessment.profile else None,
            'current_index': assessment.current_index,
            'current_question': current.to_dict() if current else None,
            'current_answer': assessment.answers.get(current.id) if current else None,
            'current_domain': get_domain_info(current.domain) if current else None,
            'question_count': len(assessment.questions),
            'progress': assessment.progress(),
            'is_complete': assessment.is_complete
        }

    def _result_payload(result):
        """Result plus the maturity description and next step for display"""
        return {
            'result': result.to_dict(),
            'maturity': classifier.classify(result.total_score).to_dict()
        }

    # =============================================================================
    # API Routes - Catalog
    # =============================================================================

    @app.route('/api/health', methods=['GET'])
    def api_health():
        """Liveness check"""
        return jsonify({'status': 'ok', 'app_name': app.config['APP_NAME']})

    @app.route('/api/catalog', methods=['GET'])
    def api_catalog():
        """Domains, maturity thresholds and catalog size"""
        return jsonify({
            'domains': get_all_domains(),
            'question_count': get_question_count(),
            'maturity_levels': classifier.get_threshold_summary()
        })

    # =============================================================================
    # API Routes - Assessment
    # =============================================================================

    @app.route('/api/assessment', methods=['GET'])
    def api_get_assessment():
        """Current wizard state"""
        return jsonify(_state_payload(_load_session()))

    @app.route('/api/assessment/questions', methods=['GET'])
    def api_list_questions():
        """Active question list with recorded answers"""
        assessment = _load_session()
        answers = assessment.answers
        return jsonify({
            'questions': [
                {**wq.to_dict(), 'answer': answers.get(wq.id)}
                for wq in assessment.questions
            ]
        })

    @app.route('/api/assessment/profile', methods=['POST'])
    def api_set_profile():
        """Submit the organization profile and start the questionnaire"""
        data = request.get_json(silent=True) or {}

        assessment = AssessmentSession(engine=engine, retain_answered=retain_answered)
        assessment.set_profile(data)
        _save_session(assessment)

        return jsonify(_state_payload(assessment)), 201

    @app.route('/api/assessment/answers', methods=['POST'])
    def api_set_answer():
        """Record an answer for an active question"""
        data = request.get_json(silent=True) or {}
        question_id = data.get('question_id')
        value = data.get('value')

        if not question_id or value is None:
            return jsonify({'error': 'bad_request', 'message': 'question_id and value required'}), 400

        assessment = _load_session()
        assessment.set_answer(question_id, value)
        _save_session(assessment)

        return jsonify(_state_payload(assessment))

    @app.route('/api/assessment/next', methods=['POST'])
    def api_next_question():
        """Advance to the next question or complete the assessment"""
        assessment = _load_session()
        assessment.advance()
        _save_session(assessment)

        payload = _state_payload(assessment)
        if assessment.is_complete:
            payload.update(_result_payload(assessment.get_result()))
        return jsonify(payload)

    @app.route('/api/assessment/previous', methods=['POST'])
    def api_previous_question():
        """Go back one question"""
        assessment = _load_session()
        assessment.retreat()
        _save_session(assessment)
        return jsonify(_state_payload(assessment))

    @app.route('/api/assessment/reset', methods=['POST'])
    def api_reset():
        """Discard the current assessment"""
        assessment = _load_session()
        assessment.reset()
        _save_session(assessment)
        return jsonify(_state_payload(assessment))

    @app.route('/api/assessment/result', methods=['GET'])
    def api_get_result():
        """Result of a completed assessment"""
        result = _load_session().get_result()
        if result is None:
            return jsonify({'error': 'not_found', 'message': 'Assessment is not complete'}), 404
        return jsonify(_result_payload(result))

    @app.route('/api/assessment/snapshot', methods=['GET'])
    def api_export_snapshot():
        """Export the session snapshot, including the result"""
        return jsonify(_load_session().to_snapshot())

    @app.route('/api/assessment/snapshot', methods=['PUT'])
    def api_import_snapshot():
        """Resume a session from a previously exported snapshot"""
        data = request.get_json(silent=True)
        assessment = AssessmentSession.from_snapshot(
            data, engine=engine, retain_answered=retain_answered
        )
        _save_session(assessment)
        return jsonify(_state_payload(assessment))

    @app.route('/api/assessment/preview', methods=['POST'])
    def api_preview_questions():
        """Questions a profile would see for a given set of answers, without touching the session"""
        data = request.get_json(silent=True) or {}
        profile = OrganizationProfile.from_dict(data.get('profile') or {})
        answers = data.get('answers') or {}
        if not isinstance(answers, dict):
            return jsonify({'error': 'bad_request', 'message': 'answers must be an object'}), 400

        questions = select_questions(profile, answers)
        return jsonify({'questions': [wq.to_dict() for wq in questions]})

    # =============================================================================
    # Error Handlers
    # =============================================================================

    @app.errorhandler(AssessmentError)
    def assessment_error(e):
        logger.info(f"Rejected assessment request: {e}")
        return jsonify(e.to_dict()), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'not_found', 'message': 'Not found'}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({'error': 'rate_limited', 'message': str(e.description)}), 429

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f"Server error: {e}")
        return jsonify({'error': 'server_error', 'message': 'Internal server error'}), 500

    return app


# =============================================================================
# Main
# =============================================================================

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'True').lower() == 'true'
    app.run(debug=debug, port=port, host='0.0.0.0')
