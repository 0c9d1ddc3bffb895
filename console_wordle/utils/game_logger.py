"""
Game Logger Module for Console Wordle

This module provides structured logging for player actions, game events
and errors. Log output never goes to the game's output stream: warnings
reach the console on stderr and, when a log directory is configured,
every entry is written to a dated log file.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

LOGGER_NAME = 'console_wordle'


class GameLogger:
    """
    Centralized logging system for the console game.

    Features:
    - Player action tracking (guesses submitted, rejected input)
    - Game event logging (start, win, loss, exhausted input)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(LOGGER_NAME)
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> logging.Logger:
        """(Re)build the handlers, adding a file handler when log_dir is given."""
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self.logger.addHandler(console_handler)

        self.log_dir = None
        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

        return self.logger

    @property
    def log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                       action: str,
                       game_id: Optional[str] = None,
                       **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'submit_guess', 'invalid_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_game_event(self,
                      game_id: Optional[str],
                      event: str,
                      level: int = logging.INFO,
                      **kwargs):
        """
        Log game-specific events (starts, wins, losses, etc.).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost')
            level: Logging level for the entry
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.log(level, self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                 error: Exception,
                 action: str,
                 game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger()
