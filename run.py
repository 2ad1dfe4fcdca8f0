#!/usr/bin/env python3
"""
Main entry point for the Gym Dashboard
"""
import os
from dashboard import create_app

# Create the Flask application
app = create_app(os.getenv('FLASK_ENV', 'development'))


@app.shell_context_processor
def make_shell_context():
    """Make the API client and resources available in flask shell"""
    from dashboard.core import APIClient, ApiSession
    from dashboard import models
    return {
        'APIClient': APIClient,
        'ApiSession': ApiSession,
        'models': models,
    }


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5001, debug=True, use_reloader=False)
