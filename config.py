import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    WTF_CSRF_ENABLED = False
    TESTING = False

    FIREBASE_ENABLED = os.environ.get('FIREBASE_ENABLED', 'true').lower() in ('true', '1')
    FIREBASE_PROJECT_ID = os.environ.get('FIREBASE_PROJECT_ID', '')
    QUESTIONS_COLLECTION = os.environ.get('QUESTIONS_COLLECTION', 'questions')
    USERS_COLLECTION = os.environ.get('USERS_COLLECTION', 'users')

    # Quota weeks and slot start hours are both evaluated in this offset
    QUIZ_UTC_OFFSET = os.environ.get('QUIZ_UTC_OFFSET', '+05:30')
    QUIZ_WEEK_START = os.environ.get('QUIZ_WEEK_START', 'sunday')

    LIST_PAGE_SIZE = int(os.environ.get('LIST_PAGE_SIZE', 10))
    LIST_PARTITION_CAP = int(os.environ.get('LIST_PARTITION_CAP', 500))

    TIMETABLE_PATH = os.environ.get('TIMETABLE_PATH') or os.path.join(BASE_DIR, 'app', 'files', 'timetable.json')
    SLOT_CONFIG_PATH = os.environ.get('SLOT_CONFIG_PATH') or os.path.join(BASE_DIR, 'app', 'files', 'configs.json')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
