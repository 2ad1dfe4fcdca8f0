"""
WTForms for the gym dashboard.

Field names match the API's field names so a submitted form can be
copied straight into a draft.
"""

import math

from flask_wtf import FlaskForm
from wtforms import (
    StringField, PasswordField, BooleanField, SelectField,
    TextAreaField, IntegerField, FloatField
)
from wtforms.validators import DataRequired, InputRequired, ValidationError

DATE_INPUT = {'type': 'date'}
DATETIME_INPUT = {'type': 'datetime-local'}


def finite(form, field):
    """Reject nan/inf, which float() happily parses"""
    if field.data is not None and not math.isfinite(field.data):
        raise ValidationError('Not a valid number')


def with_placeholder(choices, placeholder):
    """Select choices led by an unselected (0) entry"""
    return [(0, placeholder)] + list(choices)


class LoginForm(FlaskForm):
    """Login form"""
    username = StringField('Username', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    remember_me = BooleanField('Remember me')


class UserForm(FlaskForm):
    """User form"""
    username = StringField('Username')
    email = StringField('Email', render_kw={'type': 'email'})
    first_name = StringField('First Name')
    last_name = StringField('Last Name')


class TrainingPackageForm(FlaskForm):
    """Training package form"""
    name = StringField('Name')
    description = TextAreaField('Description')
    price = FloatField('Price', validators=[InputRequired(), finite])


class TypePackageForm(FlaskForm):
    """Type package form"""
    name = StringField('Name')
    duration = StringField('Duration')
    rate = FloatField('Rate', validators=[InputRequired(), finite])


class MembershipForm(FlaskForm):
    """Membership form; choices come from the page's lookup lists"""
    user = SelectField('Name', coerce=int, choices=[])
    package = SelectField('Training Package', coerce=int, choices=[])
    type = SelectField('Type Package', coerce=int, choices=[])
    registration_time = StringField('Registration Time', render_kw=DATE_INPUT)
    expiration_time = StringField('Expired Time', render_kw=DATE_INPUT)


class UsageForm(FlaskForm):
    """Room usage form"""
    membership = SelectField('Membership', coerce=int, choices=[])
    room = SelectField('Room', coerce=int, choices=[])
    time = StringField('Time', render_kw=DATETIME_INPUT)


class RoomForm(FlaskForm):
    """Room form"""
    name = StringField('Name')


class EquipmentForm(FlaskForm):
    """Equipment form"""
    name = StringField('Name')
    quantity = IntegerField('Quantity', validators=[InputRequired()], default=1)
    room = SelectField('Room', coerce=int, choices=[])
