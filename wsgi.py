"""
WSGI 진입점

gunicorn 등 WSGI 서버와 Flask CLI(정기 공지 작업)에서 참조합니다.

    gunicorn wsgi:application
    flask --app wsgi announce-schedules
"""

from app import create_app

application = create_app()
app = application
