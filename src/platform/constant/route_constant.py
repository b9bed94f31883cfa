# API Route Constants

# Webinar routes
WEBINAR_BASE = '/webinars'
WEBINAR_CREATE = WEBINAR_BASE
WEBINAR_GET = f'{WEBINAR_BASE}/{{webinar_id}}'
WEBINAR_CHANGE_SEATS = f'{WEBINAR_BASE}/{{webinar_id}}/seats'

# System routes
HEALTH = '/health'
