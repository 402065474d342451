"""Quiz grader — Flask application entry point."""
import logging
import logging.handlers
import traceback

from flask import Flask, jsonify, request as flask_request
from werkzeug.exceptions import HTTPException

from config import settings
from models.quiz import load_answers, load_quiz
from routes.grading import grading_bp

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def configure_logging():
    """Console + daily-rotated file logging, 3-day retention."""
    file_handler = logging.handlers.TimedRotatingFileHandler(
        settings.LOG_FILE, when='midnight', backupCount=3, encoding='utf-8',
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(), file_handler],
    )


def create_app(quiz=None, answers=None):
    """Build the app; documents default to the configured JSON files."""
    app = Flask(__name__)
    app.config['QUIZ'] = quiz if quiz is not None else load_quiz()
    app.config['ANSWERS'] = answers if answers is not None else load_answers()

    app.register_blueprint(grading_bp, url_prefix='/api')

    @app.route('/healthz')
    def healthz():
        return jsonify({'status': 'ok'})

    # --- Request/response logging ---
    req_logger = logging.getLogger('quiz_grader.requests')

    @app.before_request
    def log_request():
        req_logger.info('>>> %s %s', flask_request.method,
                        flask_request.full_path.rstrip('?'))

    @app.after_request
    def log_response(response):
        req_logger.info('<<< %s %s  status=%d',
                        flask_request.method,
                        flask_request.full_path.rstrip('?'),
                        response.status_code)
        return response

    @app.errorhandler(Exception)
    def log_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code
        req_logger.error('!!! %s %s  EXCEPTION:\n%s',
                         flask_request.method,
                         flask_request.full_path.rstrip('?'),
                         traceback.format_exc())
        return jsonify({'error': 'Internal Server Error'}), 500

    return app


if __name__ == '__main__':
    configure_logging()
    app = create_app()
    app.run(debug=True, host=settings.HOST, port=settings.PORT, threaded=True)
