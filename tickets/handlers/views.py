"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import DomainError
from tickets.handlers.serializers import PurchaseReceiptSerializer, PurchaseRequestSerializer
from tickets.services import TicketPurchaseService, default_purchase_service


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/accounts/{account_id}/purchases"""

    def get_service(self) -> TicketPurchaseService:
        return default_purchase_service()

    def post(self, request: Request, account_id: int) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            receipt = self.get_service().purchase(account_id, serializer.to_ticket_requests())
        except DomainError as e:
            return domain_error_response(e)

        return Response(PurchaseReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)
