"""HTTP route constants shared by routers and tests."""

# Auth
AUTH_BASE = '/api/auth'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_VALIDATE = f'{AUTH_BASE}/validate'
AUTH_INFO = f'{AUTH_BASE}/info'

# Health
HEALTH = '/api/health'
SERVICE_INFO = '/api/info'
METRICS = '/metrics'

# Environments
ENVIRONMENT_BASE = '/api/environments'
ENVIRONMENTS_WITH_LUMINAIRES = f'{ENVIRONMENT_BASE}/with-luminaires'
ENVIRONMENT_BY_ID = ENVIRONMENT_BASE + '/{environment_id}'
ENVIRONMENT_EXISTS = ENVIRONMENT_BASE + '/{environment_id}/exists'

# Luminaires
LUMINAIRE_BASE = '/api/luminaires'
LUMINAIRE_BY_ID = LUMINAIRE_BASE + '/{luminaire_id}'
LUMINAIRE_BRIGHTNESS = LUMINAIRE_BASE + '/{luminaire_id}/brightness'
LUMINAIRE_COLOR = LUMINAIRE_BASE + '/{luminaire_id}/color'
LUMINAIRES_BY_ENVIRONMENT = LUMINAIRE_BASE + '/environment/{environment_id}'
LUMINAIRE_ENVIRONMENT_STATS = LUMINAIRE_BASE + '/environment/{environment_id}/stats'

# Luminaire automation
LUMINAIRE_AUTOMATION_BASE = f'{LUMINAIRE_BASE}/automation'
LUMINAIRE_EVENTS = f'{LUMINAIRE_AUTOMATION_BASE}/events'
LUMINAIRE_STATES = f'{LUMINAIRE_AUTOMATION_BASE}/states'
LUMINAIRE_TURN_ON = LUMINAIRE_AUTOMATION_BASE + '/{luminaire_id}/turn-on'
LUMINAIRE_TURN_OFF = LUMINAIRE_AUTOMATION_BASE + '/{luminaire_id}/turn-off'
LUMINAIRE_TOGGLE = LUMINAIRE_AUTOMATION_BASE + '/{luminaire_id}/toggle'
LUMINAIRE_STATE = LUMINAIRE_AUTOMATION_BASE + '/{luminaire_id}/state'
