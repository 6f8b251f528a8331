"""
Prometheus metrics for monitoring
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

# ==================== HTTP Metrics ====================

http_requests_total = Counter(
    'hallbooking_http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'hallbooking_http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# ==================== Domain Metrics ====================

bookings_submitted_total = Counter(
    'hallbooking_bookings_submitted_total',
    'Bookings persisted via /submit-form'
)

signups_total = Counter(
    'hallbooking_signups_total',
    'Signup attempts by outcome',
    ['outcome']  # created, duplicate
)

logins_total = Counter(
    'hallbooking_logins_total',
    'Login attempts by outcome',
    ['outcome']  # success, invalid
)

request_failures_total = Counter(
    'hallbooking_request_failures_total',
    'Requests that ended in a 500, by endpoint and error kind',
    ['endpoint', 'kind']
)


def record_request(method: str, endpoint: str, status: int, duration_seconds: float) -> None:
    """Record one finished HTTP request"""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration_seconds)


def render_latest() -> tuple:
    """Exposition payload and its content type"""
    return generate_latest(), CONTENT_TYPE_LATEST
