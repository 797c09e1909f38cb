import os
from datetime import datetime

from flask import current_app, has_app_context

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'logs')
LOG_NAME = 'audit.log'
MAX_LINES = 1000


def _settings():
    if has_app_context():
        return (
            current_app.config.get('AUDIT_LOG_DIR', LOG_DIR),
            current_app.config.get('AUDIT_LOG_MAX_LINES', MAX_LINES),
        )
    return LOG_DIR, MAX_LINES


def write_log(message):
    """Append a timestamped line; an unwritable log never fails the caller"""
    log_dir, max_lines = _settings()
    log_file = os.path.join(log_dir, LOG_NAME)
    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    log_entry = f"[{timestamp}] {message}\n"
    try:
        os.makedirs(log_dir, exist_ok=True)
        # Append the log entry
        with open(log_file, 'a', encoding='utf-8') as f:
            f.write(log_entry)
        truncate_log(log_file, max_lines)
    except OSError as e:
        print(f"Audit log unavailable ({log_file}): {e}")


def truncate_log(log_file, max_lines=MAX_LINES):
    """Keep only the newest max_lines entries"""
    try:
        with open(log_file, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except FileNotFoundError:
        return
    if len(lines) > max_lines:
        with open(log_file, 'w', encoding='utf-8') as f:
            f.writelines(lines[-max_lines:])
