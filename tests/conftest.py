"""Shared test fixtures — sample quiz documents and a Flask test app."""
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data')


@pytest.fixture
def quiz_doc():
    from models.quiz import load_quiz
    return load_quiz(os.path.join(DATA_DIR, 'quiz.json'))


@pytest.fixture
def answers_doc():
    from models.quiz import load_answers
    return load_answers(os.path.join(DATA_DIR, 'answers.json'))


@pytest.fixture
def app(quiz_doc, answers_doc):
    """Flask test app over the sample documents."""
    from app import create_app
    application = create_app(quiz=quiz_doc, answers=answers_doc)
    application.config['TESTING'] = True
    return application


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
