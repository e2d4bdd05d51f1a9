from datetime import datetime


def utility_processor():
    return dict(
        current_year=datetime.utcnow().year,
    )
