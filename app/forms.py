from flask import current_app, request
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField
from wtforms.validators import DataRequired, Length, NumberRange, Regexp, ValidationError, Optional

from app.errors import ValidationFailed


def _timetable():
    return current_app.extensions['slot_timetable']


class QueryForm(FlaskForm):
    """Form bound to query-string parameters of a GET request."""

    class Meta:
        csrf = False

    def __init__(self, formdata=None, **kwargs):
        super().__init__(formdata=request.args if formdata is None else formdata, **kwargs)

    def first_error(self):
        for field_errors in self.errors.values():
            if field_errors:
                return field_errors[0]
        return 'Invalid request'

    def validated(self):
        if not self.validate():
            raise ValidationFailed(self.first_error())
        return self


class ScheduleQueryForm(QueryForm):
    topic = StringField('topic', validators=[DataRequired(message='"topic" is required')])

    def validate_topic(self, topic):
        if topic.data not in _timetable().topics:
            raise ValidationError('"topic" must be one of the configured topics')


class QuestionQueryForm(QueryForm):
    id = StringField('id', validators=[
        DataRequired(message='"id" is required'),
        Length(max=128),
        Regexp(r'^[^/]+$', message='"id" must be a single document ID'),
    ])


class ListQueryForm(QueryForm):
    week = IntegerField('week', validators=[Optional(), NumberRange(min=1, max=53, message='"week" must be between 1 and 53')])
    year = IntegerField('year', validators=[Optional(), NumberRange(min=2000, max=9999, message='"year" must be a four digit year')])
    lang = StringField('lang', validators=[Optional()])
    topic = StringField('topic', validators=[Optional()])
    author = StringField('author', validators=[Optional(), Length(max=64)])
    cursor = IntegerField('cursor', validators=[Optional(), NumberRange(min=0, message='"cursor" must be a timestamp')])

    def validate_lang(self, lang):
        if lang.data not in _timetable().langs:
            raise ValidationError('"lang" must be one of the configured languages')

    def validate_topic(self, topic):
        if topic.data not in _timetable().topics:
            raise ValidationError('"topic" must be one of the configured topics')

    def filters(self):
        """Supplied filters with empty values dropped."""
        data = {
            'week': self.week.data,
            'year': self.year.data,
            'lang': self.lang.data,
            'topic': self.topic.data,
            'author': self.author.data,
            'cursor': self.cursor.data,
        }
        return {k: v for k, v in data.items() if v}
