"""
Settings routes for reading and changing a user's time zone.
"""
from flask import Blueprint, current_app, jsonify, request
from flask_app.models import db, UserPreference
from tzfield import TimeZoneError

settings_bp = Blueprint('settings', __name__)


@settings_bp.route('/<user>/timezone', methods=['GET'])
def get_timezone(user):
    """Return the stored zone, or the configured default if none is stored."""
    preference = UserPreference.query.filter_by(user=user).first()
    if preference is None:
        return jsonify({'user': user, 'timezone': current_app.config['DEFAULT_TIMEZONE']})
    return jsonify(preference.to_dict())


@settings_bp.route('/<user>/timezone', methods=['PUT'])
def put_timezone(user):
    """
    Store a zone. The body is a JSON string such as "Asia/Tokyo".

    A JSON null body keeps whatever is stored.
    """
    preference = UserPreference.query.filter_by(user=user).first()
    current = preference.timezone if preference else current_app.config['DEFAULT_TIMEZONE']

    try:
        zone = current.decode_json(request.get_data())
    except TimeZoneError as e:
        return jsonify({'error': str(e)}), 400

    if preference is None and zone is current:
        return jsonify({'user': user, 'timezone': current})

    if preference is None:
        preference = UserPreference(user=user, timezone=zone)
        db.session.add(preference)
    else:
        preference.timezone = zone
    db.session.commit()

    return jsonify(preference.to_dict())
