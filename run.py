"""
symdoc Entry Point - Start the symdoc server
Run with: python run.py
"""

from server.app import app, start_worker

if __name__ == '__main__':
    start_worker()
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
