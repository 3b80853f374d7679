from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Email, Length, Optional

from translations import get_translator

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
FIELD_MAX_LENGTH = 200

INFO_PREFIX = "dashboard.pages.organisation.info."


def set_validators(field, validators):
    """Replace a bound field's validators and the flags they imply."""
    field.validators = validators
    for validator in validators:
        for flag, value in getattr(validator, "field_flags", {}).items():
            setattr(field.flags, flag, value)


class OrganisationInfoForm(FlaskForm):
    """Organisation details; labels and validation messages follow the translator."""
    organisation_name = StringField()
    legal_name = StringField()
    street_address = StringField()
    city = StringField()
    postal_code = StringField()
    country = StringField()
    email = StringField()
    phone_number = StringField()
    submit = SubmitField()

    # field name -> translation key stem under INFO_PREFIX
    LABELS = {
        "organisation_name": "organisationName",
        "legal_name": "legalName",
        "street_address": "streetAddress",
        "city": "city",
        "postal_code": "postalCode",
        "country": "country",
        "email": "email",
        "phone_number": "phoneNumber",
    }

    def __init__(self, t=None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.t = t or get_translator()
        self._localise()

    def _localise(self):
        t = self.t
        required = t("validation.required")
        too_long = t("validation.maxLength", max=FIELD_MAX_LENGTH)

        validators = {
            "organisation_name": [
                DataRequired(message=required),
                Length(min=NAME_MIN_LENGTH,
                       message=t("validation.minLength", min=NAME_MIN_LENGTH)),
                Length(max=NAME_MAX_LENGTH,
                       message=t("validation.maxLength", max=NAME_MAX_LENGTH)),
            ],
            "email": [
                DataRequired(message=required),
                Email(message=t("validation.invalidEmail")),
                Length(max=FIELD_MAX_LENGTH, message=too_long),
            ],
        }

        for name, stem in self.LABELS.items():
            field = self[name]
            field.label.text = t(INFO_PREFIX + stem)
            field.render_kw = {"placeholder": t(INFO_PREFIX + stem + "Placeholder")}
            set_validators(field, validators.get(name) or [
                Optional(), Length(max=FIELD_MAX_LENGTH, message=too_long),
            ])
        self.submit.label.text = t(INFO_PREFIX + "saveChanges")
