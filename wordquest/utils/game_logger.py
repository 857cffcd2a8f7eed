"""
Game Logger Module for Word Quest Server

This module provides structured logging for user actions, server responses,
game events and diagnostics such as word-list fallbacks and remote scoring
failures.
"""

import logging
import json
import os
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the Word Quest server.
    
    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging
    - Diagnostic warnings for degraded collaborators
    - JSON structured logs for easy parsing
    """
    
    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        
        # Setup main game logger
        self.logger = self._setup_logger()
        
    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        
    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordquest')
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
    
    def _create_log_entry(self, 
                         event_type: str, 
                         action: str, 
                         user_info: Dict[str, Optional[str]],
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
                       game_id: Optional[str] = None,
                       **kwargs):
        """
        Log user actions with full context.
        
        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            'url': getattr(request, 'url', None),
            **kwargs
        }
        
        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)
    
    def log_server_response(self, 
                           request, 
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           game_id: Optional[str] = None,
                           **kwargs):
        """
        Log server responses with full context.
        
        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)
        
        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)
    
    def log_game_event(self, 
                      game_id: Optional[str],
                      event: str,
                      user_ip: str,
                      **kwargs):
        """
        Log game-specific events (wins, losses, etc.).
        
        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'game_expired')
            user_ip: User's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'session_id': None}
        
        details = {
            'game_id': game_id,
            **kwargs
        }
        
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)
    
    def log_error(self, 
                 request, 
                 error: Exception,
                 action: str,
                 game_id: Optional[str] = None):
        """
        Log errors with full context.
        
        Args:
            request: Flask request object
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
        
        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)
    
    def log_word_source_fallback(self, source: str, reason: str, fallback_size: int):
        """Log that a word source was unusable and the fallback list was substituted."""
        details = {
            'source': source,
            'reason': reason,
            'fallback_size': fallback_size
        }
        log_message = self._create_log_entry('DIAGNOSTIC', 'word_source_unavailable', {'user_ip': 'system'}, details)
        self.logger.warning(log_message)
    
    def log_remote_failure(self, game_id: Optional[str], error: Exception):
        """Log a failed call to the remote scoring service."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'retryable': getattr(error, 'retryable', False)
        }
        log_message = self._create_log_entry('DIAGNOSTIC', 'remote_scoring_failure', {'user_ip': 'system'}, details)
        self.logger.warning(log_message)
    
    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Limit verbosity of logged responses and keep answers out of the log."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        
        # Create a copy to avoid modifying original
        sanitized = data.copy()
        
        state = sanitized.get('state')
        if isinstance(state, dict) and 'vault_id' in state:
            # Vault states carry no answer; hints and prompt text are left out
            sanitized['state'] = {
                'level_index': state.get('level_index'),
                'level_count': state.get('level_count'),
                'attempts': state.get('attempts'),
                'solved': state.get('solved')
            }
        elif isinstance(state, dict):
            # Keep essential game state info but limit verbosity
            sanitized['state'] = {
                'status': state.get('status'),
                'current_round': state.get('current_round'),
                'max_rounds': state.get('max_rounds'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        
        return sanitized
    
    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        try:
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
                'diagnostics': 0,
                'errors': 0
            }
            
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'DIAGNOSTIC' in line:
                            stats['diagnostics'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
            
            return stats
            
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger(os.getenv('LOG_DIR', 'logs'), os.getenv('LOG_LEVEL', 'INFO'))
