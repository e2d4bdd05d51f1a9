import os

from travel_tracker import create_app
from config import config

app = create_app(config[os.environ.get('FLASK_CONFIG', 'default')])


if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f"Server running on http://localhost:{port}")
    app.run(host='0.0.0.0', port=port)
