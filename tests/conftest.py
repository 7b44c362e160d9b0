import os
import tempfile

# Settings are read at import time, so they must be in place before wordle_app loads
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))
os.environ['FALLBACK_SOLUTION'] = 'REACT'
os.environ['DIAGNOSTIC_MODE'] = 'False'
