"""
Game Logger Module for the Daily Wordle Server

This module provides logging for user actions, server responses,
and puzzle events as JSON-structured lines.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the daily puzzle server.

    Features:
    - User action tracking with IP/user identification
    - Server response logging
    - Puzzle event logging (sessions, guesses, wins, losses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, Any]:
        """Extract user identity information from request."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_id': str(getattr(request, 'user_id', None) or '') or None
        }

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'get_today', 'submit_guess')
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)

        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        self.logger.info(self._create_log_entry('USER_ACTION', action, user_info, details))

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)

        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       session_key: Optional[str],
                       event: str,
                       user_id: Any,
                       **kwargs):
        """
        Log puzzle events (session created, guesses, wins, losses).

        Args:
            session_key: "<user>:<date>" of the session, if any
            event: Type of game event (e.g., 'game_won', 'guess_rejected')
            user_id: Player the event belongs to
            **kwargs: Additional game details
        """
        user_info = {'user_ip': None, 'user_id': str(user_id) if user_id is not None else None}

        details = {
            'session': session_key,
            **kwargs
        }

        self.logger.info(self._create_log_entry('GAME_EVENT', event, user_info, details))

    def log_error(self,
                  request,
                  error: Exception,
                  action: str):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        user_info = self._get_user_identity(request)

        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        self.logger.error(self._create_log_entry('ERROR', action, user_info, details))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep response logs small; guess lists are reduced to a count."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if isinstance(sanitized.get('guesses'), list):
            sanitized['guesses'] = {'count': len(sanitized['guesses'])}
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'SERVER_RESPONSE' in line:
                        stats['server_responses'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif 'ERROR' in line:
                        stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
