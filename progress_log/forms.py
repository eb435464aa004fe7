from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, IntegerField, SubmitField
from wtforms.validators import InputRequired, Optional


# Plain form posts from the index page carry no CSRF token.
class EntryForm(FlaskForm):
    class Meta:
        csrf = False

    text = TextAreaField("What did you do?", validators=[InputRequired()])
    created_at = StringField("When", validators=[Optional()])
    submit = SubmitField("Add")


class DeleteEntryForm(FlaskForm):
    class Meta:
        csrf = False

    id = IntegerField("Entry", validators=[InputRequired()])
    submit = SubmitField("Delete")
