from rest_framework import viewsets, status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    CoinTransferSerializer,
    AddressBookEntrySerializer,
    TransferInputSerializer,
    AddressBookCreateSerializer,
    AddressBookUpdateSerializer,
    BalanceResponseSerializer,
)

from apps.coins.services import (
    transfer_coins,
    get_coin_balance,
    list_coin_transfers,
    get_entry,
    list_for_owner,
    add_entry,
    update_entry,
    remove_entry,
    # Exceptions
    InvalidAmountError,
    InvalidMessageError,
    SelfTransferError,
    InsufficientFundsError,
    RecipientNotFoundError,
    DuplicateEntryError,
    SelfEntryError,
    EntryNotFoundError,
)
from apps.rewards.services import AccountNotFoundError


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


def _error(exc, status_code):
    return Response({'error': str(exc), 'code': exc.code}, status=status_code)


@extend_schema(
    request=TransferInputSerializer,
    responses={
        201: CoinTransferSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Send coins to another user.",
    tags=['coins'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def transfer(request):
    """Transfer coins."""
    serializer = TransferInputSerializer(data=request.data)
    if not serializer.is_valid():
        # Fractional and non-numeric amounts share the service error code
        if 'amount' in serializer.errors:
            return _error(
                InvalidAmountError("Amount must be a positive whole number of coins"),
                status.HTTP_400_BAD_REQUEST
            )
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    data = serializer.validated_data

    try:
        coin_transfer = transfer_coins(
            from_user_id=request.user.id,
            to_user_id=data['to_user_id'],
            amount=data['amount'],
            message=data['message']
        )
    except (InvalidAmountError, InvalidMessageError, SelfTransferError, InsufficientFundsError) as e:
        return _error(e, status.HTTP_400_BAD_REQUEST)
    except RecipientNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)

    output_serializer = CoinTransferSerializer(coin_transfer, context={'request': request})
    return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: BalanceResponseSerializer, 404: ErrorResponseSerializer},
    description="Current coin balance.",
    tags=['coins'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def balance(request):
    """Get coin balance."""
    try:
        coins = get_coin_balance(user_id=request.user.id)
    except AccountNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)

    return Response({'coins': coins})


@extend_schema(
    responses={200: CoinTransferSerializer(many=True)},
    description="The 50 most recent completed transfers sent or received.",
    tags=['coins'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def transactions(request):
    """Get coin transfer history."""
    serializer = CoinTransferSerializer(
        list_coin_transfers(user=request.user),
        many=True,
        context={'request': request}
    )
    return Response(serializer.data)


class AddressBookViewSet(viewsets.ViewSet):
    """
    Saved transfer recipients of the current user.

    list: Favorites first, then newest
    create: Add a recipient (400 if already saved)
    retrieve / update / partial_update / destroy: owner only, 404 otherwise
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(responses={200: AddressBookEntrySerializer(many=True)})
    def list(self, request):
        serializer = AddressBookEntrySerializer(list_for_owner(owner=request.user), many=True)
        return Response(serializer.data)

    @extend_schema(
        request=AddressBookCreateSerializer,
        responses={201: AddressBookEntrySerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request):
        serializer = AddressBookCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = add_entry(owner=request.user, **serializer.validated_data)
        except (DuplicateEntryError, SelfEntryError) as e:
            return _error(e, status.HTTP_400_BAD_REQUEST)
        except RecipientNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(AddressBookEntrySerializer(entry).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: AddressBookEntrySerializer, 404: ErrorResponseSerializer})
    def retrieve(self, request, pk=None):
        try:
            entry = get_entry(owner=request.user, entry_id=pk)
        except EntryNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(AddressBookEntrySerializer(entry).data)

    @extend_schema(
        request=AddressBookUpdateSerializer,
        responses={200: AddressBookEntrySerializer, 404: ErrorResponseSerializer},
    )
    def update(self, request, pk=None):
        # Entries only carry two editable fields; PUT behaves like PATCH
        serializer = AddressBookUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = update_entry(owner=request.user, entry_id=pk, **serializer.validated_data)
        except EntryNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(AddressBookEntrySerializer(entry).data)

    @extend_schema(
        request=AddressBookUpdateSerializer,
        responses={200: AddressBookEntrySerializer, 404: ErrorResponseSerializer},
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(responses={204: None, 404: ErrorResponseSerializer})
    def destroy(self, request, pk=None):
        try:
            remove_entry(owner=request.user, entry_id=pk)
        except EntryNotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
