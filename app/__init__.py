import logging

from flask import Flask
from config import Config


def _configure_logging(level_name):
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize Firebase
    if app.config.get('FIREBASE_ENABLED') and not app.config.get('TESTING'):
        from app.firebase_init import init_firebase
        init_firebase(app.config)

    # Weekly slot timetable is read-only reference data, loaded once
    from app.timetable import SlotTimetable
    app.extensions['slot_timetable'] = SlotTimetable.load(
        app.config['TIMETABLE_PATH'],
        app.config['SLOT_CONFIG_PATH'],
    )

    from app.decorators import load_auth_context

    @app.before_request
    def before_request():
        load_auth_context()

    # Register blueprints
    from app.routes import main, mcq_get
    app.register_blueprint(main.bp)
    app.register_blueprint(mcq_get.bp)

    return app
