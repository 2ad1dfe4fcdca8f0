import logging
import os

from flask import Flask
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

from .config import config

# Initialize extensions
login_manager = LoginManager()
csrf = CSRFProtect()

# Login configuration
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please log in to access this page'
login_manager.login_message_category = 'warning'

# Sidebar entries: (endpoint, label)
NAV_ITEMS = [
    ('dashboard.index', 'Overview'),
    ('users.index', 'Users'),
    ('members.index', 'Members'),
    ('training_packages.index', 'Training Packages'),
    ('type_packages.index', 'Type Packages'),
    ('usages.index', 'Usages'),
    ('rooms.index', 'Rooms'),
    ('equipments.index', 'Equipment'),
]


def create_app(config_name=None):
    """Application factory"""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    configure_logging(app)

    # Initialize extensions with app
    login_manager.init_app(app)
    csrf.init_app(app)

    # Register blueprints
    from .routes.auth import auth_bp
    from .routes.dashboard import dashboard_bp
    from .routes.users import users_bp
    from .routes.members import members_bp
    from .routes.packages import training_packages_bp, type_packages_bp
    from .routes.usages import usages_bp
    from .routes.rooms import rooms_bp, equipments_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(members_bp, url_prefix='/members')
    app.register_blueprint(training_packages_bp, url_prefix='/training-packages')
    app.register_blueprint(type_packages_bp, url_prefix='/type-packages')
    app.register_blueprint(usages_bp, url_prefix='/usages')
    app.register_blueprint(rooms_bp, url_prefix='/rooms')
    app.register_blueprint(equipments_bp, url_prefix='/equipments')

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Template helpers
    from .utils.helpers import format_date, format_datetime, format_currency

    app.add_template_filter(format_date, 'date')
    app.add_template_filter(format_datetime, 'datetime')
    app.add_template_filter(format_currency, 'currency')

    @app.context_processor
    def inject_globals():
        return {
            'gym_name': app.config['GYM_NAME'],
            'nav_items': NAV_ITEMS,
        }

    app.logger.info(f"Dashboard started against {app.config['API_BASE_URL']}")
    return app


def configure_logging(app):
    """Root logging setup, once per process"""
    level = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    logging.getLogger('dashboard').setLevel(level)


def register_error_handlers(app):
    """Register error handlers"""
    from flask import render_template, flash, request, session
    from flask_login import logout_user

    from .core.exceptions import SessionExpired
    from .core.session import ApiSession
    from .utils.helpers import login_redirect

    @app.errorhandler(SessionExpired)
    def session_expired(error):
        app.logger.warning(f"API session rejected on {request.path}: {error}")
        ApiSession().save(session)
        logout_user()
        flash('Your session has expired, please log in again', 'warning')
        return login_redirect()

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template('errors/403.html'), 403

    @app.errorhandler(500)
    def internal_error(error):
        return render_template('errors/500.html'), 500


def register_cli_commands(app):
    """Register CLI commands"""
    import click

    @app.cli.command('check-api')
    @click.option('--username', prompt='Username', help='API username')
    @click.option('--password', prompt='Password', hide_input=True, help='API password')
    def check_api(username, password):
        """Check that the gym API is reachable and accepts these credentials"""
        from .core.api_client import APIClient
        from .core.exceptions import APIError

        client = APIClient(
            app.config['API_BASE_URL'],
            auth_scheme=app.config['API_AUTH_SCHEME'],
            login_path=app.config['API_LOGIN_PATH'],
            timeout=app.config['API_TIMEOUT'] or 10,
        )

        reachable, message = client.test_connection()
        if not reachable:
            click.echo(f'API not reachable: {message}')
            raise SystemExit(1)
        click.echo(f'API reachable at {client.base_url}')

        try:
            client.login(username, password)
        except APIError as e:
            click.echo(f'Login failed: {e}')
            raise SystemExit(1)

        click.echo(f'Logged in as {username}')
