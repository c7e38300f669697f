from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .models import User
from .permissions import IsAdminMember
from .serializers import (
    UserSerializer,
    MemberRegistrationSerializer,
    MemberLoginSerializer,
    ProfileUpdateSerializer,
)
from .services import (
    register_member,
    authenticate_member,
    approve_member,
    delete_member,
    update_profile,
    MemberRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PendingApprovalError,
    MemberNotFoundError,
    CannotDeleteSelfError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=MemberRegistrationSerializer,
    responses={
        201: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new member. The account stays pending until an admin approves it.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new member account."""
    serializer = MemberRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_member(**data)
    except MemberRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Registration successful. Your account is pending approval.',
        'user': UserSerializer(user).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=MemberLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = MemberLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_member(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except (InactiveAccountError, PendingApprovalError) as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated member's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated member profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=ProfileUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current member's profile (username, email, telegram_id).",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_current_user(request):
    """Update current member profile."""
    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_profile(user=request.user, **serializer.validated_data)
    except MemberRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data)


@extend_schema(
    responses={200: UserSerializer(many=True)},
    description="List all members (admin only).",
    tags=['members'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminMember])
def list_members(request):
    """List members, optionally filtered by status."""
    members = User.objects.all()
    member_status = request.query_params.get('status')
    if member_status:
        members = members.filter(status=member_status)
    return Response(UserSerializer(members, many=True).data)


@extend_schema(
    request=None,
    responses={200: UserSerializer, 404: ErrorResponseSerializer},
    description="Approve a pending member (admin only).",
    tags=['members'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminMember])
def approve(request, pk):
    """Approve a pending member."""
    try:
        member = approve_member(member_id=pk)
    except MemberNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(UserSerializer(member).data)


@extend_schema(
    responses={204: None, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Delete a member account (admin only).",
    tags=['members'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminMember])
def delete(request, pk):
    """Delete a member."""
    try:
        delete_member(member_id=pk, deleted_by=request.user)
    except MemberNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except CannotDeleteSelfError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(status=status.HTTP_204_NO_CONTENT)
