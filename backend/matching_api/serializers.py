from rest_framework import serializers

from matching.models import DestinationQuery
from routing.validation import InvalidInputError, validate_point, validate_radius


class DestinationQuerySerializer(serializers.Serializer):
    """
    Validates the rider's search. Every error is keyed by the field name
    so the app can point at what was wrong.
    """
    origin = serializers.ListField(child=serializers.FloatField(), min_length=2, max_length=2)
    destination = serializers.ListField(child=serializers.FloatField(), min_length=2, max_length=2)
    radius_m = serializers.FloatField()
    include_taxis = serializers.BooleanField(default=False)

    def validate_origin(self, value):
        return self._point(value, "origin")

    def validate_destination(self, value):
        return self._point(value, "destination")

    def validate_radius_m(self, value):
        try:
            return validate_radius(value)
        except InvalidInputError as exc:
            raise serializers.ValidationError(exc.message)

    def _point(self, value, field):
        try:
            return validate_point(value, field)
        except InvalidInputError as exc:
            raise serializers.ValidationError(exc.message)

    def to_query(self) -> DestinationQuery:
        data = self.validated_data
        return DestinationQuery(
            origin=data['origin'],
            destination=data['destination'],
            radius_m=data['radius_m'],
            include_taxis=data['include_taxis'],
        )


class StopSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    coords = serializers.ListField(child=serializers.FloatField())


class RouteSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    polyline = serializers.ListField(child=serializers.ListField(child=serializers.FloatField()))
    stops = StopSerializer(many=True)


class VehicleSerializer(serializers.Serializer):
    id = serializers.CharField()
    owner_id = serializers.CharField(allow_null=True)
    plate = serializers.CharField(allow_null=True)
    capacity = serializers.IntegerField()
    route_id = serializers.CharField(allow_null=True)
    status = serializers.CharField(source='status.value')
    occupancy = serializers.IntegerField()
    coords = serializers.ListField(child=serializers.FloatField())


class CandidateVehicleSerializer(serializers.Serializer):
    # field names mirror CandidateVehicle.to_dict(); the rider app depends on them
    vehicle = VehicleSerializer()
    route = RouteSerializer(allow_null=True)
    eta_to_pickup_min = serializers.IntegerField()
    eta_to_destination_min = serializers.IntegerField()
    fare_estimate = serializers.FloatField()
    occupancy_pct = serializers.IntegerField()
    will_pass_near_destination = serializers.BooleanField()
    is_over_capacity = serializers.BooleanField()
    currency = serializers.CharField()
