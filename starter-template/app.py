"""
Portfolio Starter
=================

A ready-to-run Flask application with every portfolio module enabled.

Run with:
    python app.py

Visit:
    http://localhost:5000/api/skills   - Public skills
    http://localhost:5000/health       - Health check
"""

import os

from flask import Flask, jsonify
from folio import Folio

# Create Flask app
app = Flask(__name__)

# Session security
app.config['SESSION_COOKIE_SECURE'] = os.getenv('ENVIRONMENT') == 'production'
app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Strict'

# Initialize Folio - this registers all modules automatically
folio = Folio(app)


@app.route('/')
def index():
    """Index of the public endpoints"""
    return jsonify({
        'skills': '/api/skills',
        'skills_grouped': '/api/skills/grouped',
        'projects': '/api/projects',
        'articles': '/api/articles',
        'resume': '/api/resume',
    })


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Portfolio Starter")
    print("=" * 60)
    print("Public API:      http://localhost:5000/api/skills")
    print("Admin login:     POST /api/login {idToken}")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=int(os.getenv('PORT', '5000')), debug=True)
