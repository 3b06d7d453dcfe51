"""
Session manager for handling one interpreter per HTTP session.
"""
import logging
from typing import Dict

from txdb import Interpreter

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages txdb interpreters per session.
    
    Interpreters are dropped on re-init or close, not when the cache session
    behind their key expires.
    """
    
    _interpreters: Dict[str, Interpreter] = {}
    
    @classmethod
    def get_interpreter(cls, session_key: str) -> Interpreter:
        """Get or create the interpreter for the session."""
        if session_key not in cls._interpreters:
            logger.debug("Creating interpreter for session %s", session_key)
            cls._interpreters[session_key] = Interpreter()
        
        return cls._interpreters[session_key]
    
    @classmethod
    def reset_interpreter(cls, session_key: str) -> Interpreter:
        """Replace the session's interpreter with a fresh one."""
        cls._interpreters[session_key] = Interpreter()
        return cls._interpreters[session_key]
    
    @classmethod
    def close_session(cls, session_key: str) -> None:
        """Drop a session's interpreter."""
        cls._interpreters.pop(session_key, None)
    
    @classmethod
    def close_all_sessions(cls) -> None:
        """Drop every interpreter."""
        for session_key in list(cls._interpreters.keys()):
            cls.close_session(session_key)


# Global session manager instance
session_manager = SessionManager()
