from rest_framework.views import APIView
from utils.permissions import IsSystemAdmin
from utils.response import success_response

from .models import ClinicSettings
from .policy import POLICY_FIELDS, normalize_policy
from .serializers import ClinicProfileSerializer, ClinicSettingsSerializer
from .services import save_settings


class ClinicSettingsView(APIView):
    """
    GET: clinic profile plus the normalized queue policy
    PUT: update; policy values are clamped, never rejected
    """
    permission_classes = [IsSystemAdmin]

    def _payload(self, row):
        data = ClinicSettingsSerializer(row).data
        data.update(normalize_policy(row).as_dict())
        return data

    def get(self, request):
        return success_response(self._payload(ClinicSettings.load()))

    def put(self, request):
        profile = ClinicProfileSerializer(data=request.data, partial=True)
        profile.is_valid(raise_exception=True)
        raw_policy = {name: request.data[name] for name in POLICY_FIELDS if name in request.data}

        row, _ = save_settings(profile=profile.validated_data, raw_policy=raw_policy)
        return success_response(self._payload(row), message='Settings saved')
