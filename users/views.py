import logging
import os
import time

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.core.files.storage import default_storage
from django.middleware.csrf import get_token
from rest_framework import generics, permissions, status
from rest_framework.authentication import SessionAuthentication
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from jobboard_core.throttling import AuthRateThrottle, AuthThrottled
from .permissions import IsSeeker
from .serializers import (
    LoginSerializer, RegistrationSerializer, SessionUserSerializer, UserSerializer,
)
from .validators import validate_resume_file

User = get_user_model()
logger = logging.getLogger(__name__)


class AuthThrottleMixin:
    """
    Per-IP rate limit shared by every endpoint that checks a password.
    """
    throttle_classes = [AuthRateThrottle]

    def throttled(self, request, wait):
        raise AuthThrottled(wait)


class AuthEndpointMixin(AuthThrottleMixin):
    """
    Login/register: rate limited per IP and CSRF checked even for anonymous
    callers (DRF only checks CSRF once a session user exists).
    """
    authentication_classes = []
    permission_classes = (permissions.AllowAny,)

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        SessionAuthentication().enforce_csrf(request)


class TokenView(AuthThrottleMixin, TokenObtainPairView):
    pass


class RegisterView(AuthEndpointMixin, APIView):
    def post(self, request):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info("Registered %s user %s", user.role, user.id)
        return Response(SessionUserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(AuthEndpointMixin, APIView):
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"message": "Invalid email or password"}, status=status.HTTP_401_UNAUTHORIZED)

        user = authenticate(
            request,
            username=serializer.validated_data['email'].lower(),
            password=serializer.validated_data['password'],
        )
        if user is None:
            return Response({"message": "Invalid email or password"}, status=status.HTTP_401_UNAUTHORIZED)

        login(request, user)
        return Response(SessionUserSerializer(user).data)


class LogoutView(APIView):
    permission_classes = (permissions.IsAuthenticated,)

    def post(self, request):
        logout(request)
        response = Response({"message": "Logged out successfully"})
        response.delete_cookie(settings.SESSION_COOKIE_NAME)
        return response


class CurrentUserView(generics.RetrieveUpdateAPIView):
    """
    GET: the session identity. PATCH: update own profile fields.
    """
    permission_classes = (permissions.IsAuthenticated,)
    http_method_names = ['get', 'patch', 'head', 'options']

    def get_object(self):
        return self.request.user

    def get_serializer_class(self):
        if self.request.method == 'GET':
            return SessionUserSerializer
        return UserSerializer

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)


class UserProfileView(generics.RetrieveAPIView):
    """
    Full profile of the logged in user.
    """
    permission_classes = (permissions.IsAuthenticated,)
    serializer_class = UserSerializer

    def get_object(self):
        return self.request.user


class CsrfTokenView(APIView):
    permission_classes = (permissions.AllowAny,)

    def get(self, request):
        return Response({"csrfToken": get_token(request)})


class ResumeUploadView(APIView):
    """
    Stores a PDF resume and returns its public URL.
    """
    permission_classes = (IsSeeker,)
    parser_classes = (MultiPartParser, FormParser)

    def post(self, request):
        upload = request.FILES.get('resume')
        validate_resume_file(upload)

        extension = os.path.splitext(upload.name)[1].lower() or '.pdf'
        name = default_storage.save(
            f"resumes/{request.user.id}-{int(time.time() * 1000)}{extension}", upload
        )
        return Response({"url": default_storage.url(name)}, status=status.HTTP_201_CREATED)
