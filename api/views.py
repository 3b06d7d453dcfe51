"""
API views for the transactional key-value store.
"""
import logging
from datetime import datetime

from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from txdb.exceptions import SessionTerminatedError

from .session_manager import session_manager
from .serializers import (
    BatchCommandSerializer,
    BatchResponseSerializer,
    CommandResponseSerializer,
    CommandSerializer,
    SessionStatusSerializer,
)

logger = logging.getLogger(__name__)


class BaseSessionView(APIView):
    """Base view with common functionality."""
    
    def get_session_key(self) -> str:
        """Get session key for interpreter management."""
        if not self.request.session.session_key:
            self.request.session.create()
        return self.request.session.session_key
    
    def get_interpreter(self):
        """Get interpreter instance for current session."""
        session_key = self.get_session_key()
        return session_manager.get_interpreter(session_key)
    
    def handle_txdb_error(self, error: Exception) -> Response:
        """Handle txdb errors."""
        if isinstance(error, SessionTerminatedError):
            return Response({
                'error': 'SessionTerminatedError',
                'message': str(error)
            }, status=status.HTTP_409_CONFLICT)
        
        else:
            logger.exception("Unexpected error while executing commands")
            return Response({
                'error': 'InternalError',
                'message': str(error)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class HealthCheckView(APIView):
    """Health check endpoint."""
    
    def get(self, request) -> Response:
        """Get health status."""
        return Response({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'version': settings.TXDB_API_VERSION,
        }, status=status.HTTP_200_OK)


class SessionInitView(BaseSessionView):
    """Create or reset the session's interpreter."""
    
    def post(self, request) -> Response:
        """Start from an empty store under a new session key."""
        old_key = request.session.session_key
        if old_key:
            session_manager.close_session(old_key)
            request.session.cycle_key()
        session_key = self.get_session_key()
        session_manager.reset_interpreter(session_key)
        
        return Response({
            'message': 'Session initialized successfully',
            'session_id': session_key,
            'status': 'ready'
        }, status=status.HTTP_201_CREATED)


class SessionStatusView(BaseSessionView):
    """Report the session's transaction depth and size."""
    
    def get(self, request) -> Response:
        """Get current session status."""
        session = self.get_interpreter().session
        serializer = SessionStatusSerializer({
            'transaction_depth': session.stack.depth,
            'keys': len(session.scope),
            'terminated': session.terminated,
        })
        return Response(serializer.data, status=status.HTTP_200_OK)


class CommandView(BaseSessionView):
    """Execute a single command line."""
    
    def post(self, request) -> Response:
        """Run one line and return what the CLI would print."""
        serializer = CommandSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            interpreter = self.get_interpreter()
            result = interpreter.execute(serializer.validated_data['line'])
            
            response = CommandResponseSerializer({
                'lines': result.lines,
                'terminated': result.terminated,
            })
            return Response(response.data, status=status.HTTP_200_OK)
        
        except Exception as e:
            return self.handle_txdb_error(e)


class BatchCommandView(BaseSessionView):
    """Execute several command lines in order."""
    
    def post(self, request) -> Response:
        """Run lines until they run out or END is reached."""
        serializer = BatchCommandSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            interpreter = self.get_interpreter()
            lines = []
            processed = 0
            terminated = False
            
            for line in serializer.validated_data['lines']:
                result = interpreter.execute(line)
                lines.extend(result.lines)
                processed += 1
                if result.terminated:
                    terminated = True
                    break
            
            response = BatchResponseSerializer({
                'lines': lines,
                'processed': processed,
                'terminated': terminated,
            })
            return Response(response.data, status=status.HTTP_200_OK)
        
        except Exception as e:
            return self.handle_txdb_error(e)
