"""Quiz grader — centralized configuration."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, 'data')

# Quiz and answer documents
QUIZ_PATH = os.environ.get('QUIZ_PATH', os.path.join(DATA_DIR, 'quiz.json'))
ANSWERS_PATH = os.environ.get('ANSWERS_PATH', os.path.join(DATA_DIR, 'answers.json'))

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FILE = os.environ.get('LOG_FILE', os.path.join(BASE_DIR, 'quiz_grader.log'))

# Dev server
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', '5002'))

# Answer rule defaults (applied when a rule or question leaves them out)
GRADING_DEFAULTS = {
    'default_score': 1,
    'case_insensitive': True,
    'normalize_zh': False,
    'tolerance': 0.0,
}
