"""
Game Logger Module

Writes one JSON object per log line to a dated file under the log
directory. Warnings and errors are echoed to the console.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

# Substring that identifies each entry kind in a log line, checked in order
_STAT_MARKERS = (
    ('user_actions', '"USER_ACTION"'),
    ('server_responses', '"SERVER_RESPONSE_'),
    ('game_events', '"GAME_EVENT"'),
    ('errors', '"ERROR"'),
)


def resolve_level(level) -> int:
    """Map a level name or number to a logging level, INFO when unrecognized."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


class GameLogger:
    """Structured event log shared by the HTTP and WebSocket layers."""

    def __init__(self, log_dir: str = "logs", level="INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = resolve_level(level)
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, event_type: str, action: str, user_info: Dict[str, Any],
               details: Dict[str, Any], level: int = logging.INFO) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record a client request before it is handled.

        Args:
            request: Flask request (HTTP or Socket.IO context)
            action: 'new_game', 'submit_guess', 'get_state', ...
            game_id: Game the action targets, if any
            **kwargs: Extra detail fields
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            'url': getattr(request, 'url', None),
            **kwargs
        }
        self._write('USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record the payload sent back for an action; failures log at ERROR."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        self._write(event_type, action, get_user_identity(request), details,
                    logging.INFO if success else logging.ERROR)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Record a game outcome such as 'game_won', 'game_lost' or 'game_abandoned'."""
        self._write('GAME_EVENT', event, {'user_ip': user_ip, 'session_id': None},
                    {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._write('ERROR', action, get_user_identity(request), details, logging.ERROR)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a game state with counters so the answer never reaches the log."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        state = sanitized.get('state')
        if isinstance(state, dict):
            sanitized['state'] = {
                'current_guess': state.get('current_guess'),
                'max_guesses': state.get('max_guesses'),
                'game_over': state.get('game_over'),
                'solved': state.get('solved'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by kind."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
        }
        stats.update({key: 0 for key, _ in _STAT_MARKERS})

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    for key, marker in _STAT_MARKERS:
                        if marker in line:
                            stats[key] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
