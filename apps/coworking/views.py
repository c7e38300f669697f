from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsApprovedMember
from apps.catalog.services import ProductNotFoundError
from .models import CoworkingSession
from .serializers import (
    CoworkingSessionSerializer,
    ConsumedExtraSerializer,
    StartSessionSerializer,
    AddExtraSerializer,
    RemoveExtraSerializer,
    FinishSessionSerializer,
    SessionFilterSerializer,
    BillSerializer,
)
from .services import (
    start_session,
    add_extra as add_session_extra,
    remove_extra as remove_session_extra,
    estimate_bill,
    finish_session,
    SessionNotFoundError,
    SessionAlreadyFinishedError,
    ExtraNotFoundError,
    InvalidExtraProductError,
)


class CoworkingSessionViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for coworking sessions.

    list: Sessions, oldest first (filter: status)
    create: Start a session
    retrieve: Session with its extras
    add_extra: Add a fridge/food product
    remove_extra: Remove or decrement an extra
    estimate: Running bill
    finish: Finish and record the order
    """

    queryset = CoworkingSession.objects.prefetch_related('extras')
    serializer_class = CoworkingSessionSerializer
    permission_classes = [IsAuthenticated, IsApprovedMember]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filters = SessionFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        if 'status' in filters.validated_data:
            queryset = queryset.filter(status=filters.validated_data['status'])
        return queryset

    @extend_schema(request=StartSessionSerializer, responses={201: CoworkingSessionSerializer})
    def create(self, request, *args, **kwargs):
        serializer = StartSessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = start_session(
            client_name=serializer.validated_data['client_name'],
            started_by=request.user,
        )
        return Response(CoworkingSessionSerializer(session).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=AddExtraSerializer,
        responses={200: ConsumedExtraSerializer},
        description="Add a fridge or food product to an active session.",
        tags=['coworking'],
    )
    @action(detail=True, methods=['post'], url_path='extras')
    def add_extra(self, request, pk=None):
        serializer = AddExtraSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            extra = add_session_extra(
                session_id=pk,
                product_id=serializer.validated_data['product'],
                quantity=serializer.validated_data['quantity'],
            )
        except (SessionNotFoundError, ProductNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SessionAlreadyFinishedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except InvalidExtraProductError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ConsumedExtraSerializer(extra).data)

    @extend_schema(
        parameters=[RemoveExtraSerializer],
        responses={200: ConsumedExtraSerializer, 204: None},
        description="Remove an extra, or decrement it by ?quantity=.",
        tags=['coworking'],
    )
    @action(detail=True, methods=['delete'], url_path=r'extras/(?P<extra_id>[^/.]+)')
    def remove_extra(self, request, pk=None, extra_id=None):
        serializer = RemoveExtraSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        try:
            extra = remove_session_extra(
                session_id=pk,
                extra_id=extra_id,
                quantity=serializer.validated_data.get('quantity'),
            )
        except (SessionNotFoundError, ExtraNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SessionAlreadyFinishedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        if extra is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(ConsumedExtraSerializer(extra).data)

    @extend_schema(
        responses={200: BillSerializer},
        description="Running bill for the session up to now.",
        tags=['coworking'],
    )
    @action(detail=True, methods=['get'])
    def estimate(self, request, pk=None):
        try:
            bill = estimate_bill(session_id=pk)
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(BillSerializer(bill).data)

    @extend_schema(
        request=FinishSessionSerializer,
        responses={200: CoworkingSessionSerializer},
        description="Finish the session and record the coworking order.",
        tags=['coworking'],
    )
    @action(detail=True, methods=['post'])
    def finish(self, request, pk=None):
        serializer = FinishSessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = finish_session(
                session_id=pk,
                payment_method=serializer.validated_data['payment_method'],
                finished_by=request.user,
            )
        except SessionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SessionAlreadyFinishedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CoworkingSessionSerializer(session).data)
