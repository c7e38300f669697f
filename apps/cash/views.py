from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from apps.sales.serializers import DateRangeSerializer
from apps.sales.services import day_bounds
from .serializers import (
    CashSessionSerializer,
    StartDaySerializer,
    CloseDaySerializer,
    CurrentReportSerializer,
    SessionHistorySerializer,
)
from .services import (
    start_day,
    close_day,
    current_report,
    session_history,
    DuplicateSessionError,
    NoActiveSessionError,
)


@extend_schema(
    request=StartDaySerializer,
    responses={201: CashSessionSerializer},
    description="Open the cash register for the day. Rejected with 409 while "
                "another session is open.",
    tags=['cash'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def start(request):
    """Open day - thin HTTP handler."""
    serializer = StartDaySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        session = start_day(
            start_amount=serializer.validated_data['start_amount'],
            opened_by=request.user,
        )
    except DuplicateSessionError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(CashSessionSerializer(session).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=CloseDaySerializer,
    responses={200: CashSessionSerializer},
    description="Close the open session with the counted cash and store the "
                "expected amount and difference.",
    tags=['cash'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def close(request):
    """Close day - thin HTTP handler."""
    serializer = CloseDaySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        session = close_day(
            counted_amount=serializer.validated_data['counted_amount'],
            closed_by=request.user,
        )
    except NoActiveSessionError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(CashSessionSerializer(session).data)


@extend_schema(
    responses={200: CurrentReportSerializer},
    description="Live figures for the open session.",
    tags=['cash'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def current(request):
    """Current session report - thin HTTP handler."""
    try:
        report = current_report()
    except NoActiveSessionError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(CurrentReportSerializer(report).data)


@extend_schema(
    parameters=[DateRangeSerializer],
    responses={200: SessionHistorySerializer},
    description="Closed sessions and sales totals for an inclusive date range.",
    tags=['cash'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsApprovedMember])
def history(request):
    """Session history - thin HTTP handler."""
    query = DateRangeSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    start_at, end_at = day_bounds(
        query.validated_data.get('date_from'),
        query.validated_data.get('date_to'),
    )
    data = session_history(start=start_at, end=end_at)
    return Response(SessionHistorySerializer(data).data)
