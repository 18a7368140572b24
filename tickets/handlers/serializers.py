"""Serializers for purchase requests and receipts."""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for one line of a purchase request."""

    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    quantity = serializers.IntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for the body of a purchase request."""

    tickets = TicketRequestSerializer(many=True, allow_empty=True)

    def to_ticket_requests(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest.from_strings(item["ticket_type"], item["quantity"])
            for item in self.validated_data["tickets"]
        ]


class TicketCountsSerializer(serializers.Serializer):
    """Serializer for TicketCounts domain model."""

    adult = serializers.IntegerField()
    child = serializers.IntegerField()
    infant = serializers.IntegerField()
    total = serializers.IntegerField()


class PurchaseReceiptSerializer(serializers.Serializer):
    """Serializer for PurchaseReceipt domain model."""

    account_id = serializers.IntegerField()
    total_amount = serializers.IntegerField()
    seats_reserved = serializers.IntegerField()
    tickets = TicketCountsSerializer(source="counts")
