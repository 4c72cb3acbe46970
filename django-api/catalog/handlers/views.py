"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog import cache as catalog_cache
from catalog.domain import OrganiserClaim
from catalog.domain.errors import DomainError, ErrorCode
from catalog.handlers.serializers import (
    ExperienceInputSerializer,
    ExperienceSerializer,
    TripSerializer,
)
from catalog.services import ExperienceService, TripService
from catalog.stores.django_store import (
    DjangoExperienceStore,
    DjangoTripStore,
    DjangoUserStore,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ACCESS_DENIED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(request: Request, error: DomainError) -> Response:
    status_code = ERROR_STATUS[error.code]
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.path, error)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.path, error)
    return Response(
        {"code": error.code.value, "message": error.message}, status=status_code
    )


def experience_service() -> ExperienceService:
    return ExperienceService(DjangoExperienceStore(), DjangoUserStore())


def trip_service() -> TripService:
    return TripService(DjangoTripStore())


def claim_from(request: Request) -> OrganiserClaim:
    """Build the identity claim for the authenticated user."""
    user = request.user
    return OrganiserClaim(
        email=user.email,
        is_organiser=bool(getattr(user, "is_organiser", False)),
    )


class ExperienceListView(APIView):
    """Handler for GET and POST /api/experiences"""

    def get(self, request: Request) -> Response:
        data = cache.get(catalog_cache.EXPERIENCE_LIST_KEY)
        if data is None:
            try:
                experiences = experience_service().list_experiences()
            except DomainError as exc:
                return error_response(request, exc)
            data = ExperienceSerializer(experiences, many=True).data
            cache.set(catalog_cache.EXPERIENCE_LIST_KEY, data, catalog_cache.cache_ttl())
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = ExperienceInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": ErrorCode.INVALID_INPUT.value,
                    "message": "Malformed experience payload",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            experience = experience_service().create_experience(
                serializer.save(), organiser_id=request.user.pk
            )
        except DomainError as exc:
            return error_response(request, exc)
        logger.info("Experience %s created by organiser %s", experience.id, request.user.pk)
        return Response(ExperienceSerializer(experience).data, status=status.HTTP_201_CREATED)


class ExperienceDetailView(APIView):
    """Handler for GET /api/experiences/{experience_id}"""

    def get(self, request: Request, experience_id: str) -> Response:
        key = catalog_cache.experience_detail_key(experience_id)
        data = cache.get(key)
        if data is None:
            try:
                experience = experience_service().get_experience(experience_id)
            except DomainError as exc:
                return error_response(request, exc)
            data = ExperienceSerializer(experience).data
            cache.set(
                catalog_cache.experience_detail_key(experience.id),
                data,
                catalog_cache.cache_ttl(),
            )
        return Response(data)


class OrganiserExperienceListView(APIView):
    """Handler for GET /api/experiences/organiser/{organiser_id}

    Never cached: the response depends on who is asking.
    """

    def get(self, request: Request, organiser_id: str) -> Response:
        try:
            experiences = experience_service().list_for_organiser(
                organiser_id, claim_from(request)
            )
        except DomainError as exc:
            return error_response(request, exc)
        return Response(ExperienceSerializer(experiences, many=True).data)


class TripListView(APIView):
    """Handler for GET /api/trips"""

    def get(self, request: Request) -> Response:
        data = cache.get(catalog_cache.TRIP_LIST_KEY)
        if data is None:
            try:
                trips = trip_service().list_trips()
            except DomainError as exc:
                return error_response(request, exc)
            data = TripSerializer(trips, many=True).data
            cache.set(catalog_cache.TRIP_LIST_KEY, data, catalog_cache.cache_ttl())
        return Response(data)


class UpcomingTripListView(APIView):
    """Handler for GET /api/trips/upcoming"""

    def get(self, request: Request) -> Response:
        try:
            trips = trip_service().list_upcoming_trips()
        except DomainError as exc:
            return error_response(request, exc)
        return Response(TripSerializer(trips, many=True).data)


class TripDetailView(APIView):
    """Handler for GET /api/trips/{trip_id}"""

    def get(self, request: Request, trip_id: str) -> Response:
        key = catalog_cache.trip_detail_key(trip_id)
        data = cache.get(key)
        if data is None:
            try:
                trip = trip_service().get_trip(trip_id)
            except DomainError as exc:
                return error_response(request, exc)
            data = TripSerializer(trip).data
            cache.set(catalog_cache.trip_detail_key(trip.id), data, catalog_cache.cache_ttl())
        return Response(data)
