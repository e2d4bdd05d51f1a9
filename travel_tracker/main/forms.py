# travel_tracker/main/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, RadioField, SubmitField
from wtforms.validators import DataRequired, Length, Regexp

# --- Define Constants Used in Forms ---
COLOR_CHOICES = [
    ('teal', 'Teal'),
    ('powderblue', 'Powder blue'),
    ('yellowgreen', 'Yellow green'),
    ('olive', 'Olive'),
    ('orange', 'Orange'),
    ('hotpink', 'Hot pink'),
    ('tomato', 'Tomato'),
    ('slateblue', 'Slate blue'),
]

NAME_REGEX = r"^[^<>]*$"


# --- Forms ---
class AddCountryForm(FlaskForm):
    country = StringField('Country', validators=[
        DataRequired(message='Enter a country name.'),
        Length(max=100),
    ])
    submit = SubmitField('Add')


class NewUserForm(FlaskForm):
    name = StringField('Name', validators=[
        DataRequired(message='Enter a name.'),
        Length(max=15, message='Name must be 15 characters or fewer.'),
        Regexp(NAME_REGEX, message='Name contains invalid characters.'),
    ])
    color = RadioField('Colour', choices=COLOR_CHOICES, validators=[
        DataRequired(message='Pick a colour.'),
    ])
    submit = SubmitField('Add')
