# Isla gunicorn configuration

# Server socket
bind = "127.0.0.1:8031"
backlog = 2048

# Worker processes
# Each worker keeps its own icon cache; threads within a worker share it.
workers = 2
worker_class = "gthread"
threads = 4
timeout = 30
keepalive = 2

# Render the catalog before forking so workers start with a warm cache
preload_app = True
raw_env = ["ISLA_WARM_CACHE=1"]

# Logging
accesslog = "/var/log/gunicorn-isla/access.log"
errorlog = "/var/log/gunicorn-isla/error.log"
loglevel = "info"

# Process naming
proc_name = "isla"

# Server mechanics
daemon = False
pidfile = "/var/run/gunicorn-isla/isla.pid"
umask = 0
user = None
group = None
