from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response

class TournamentPagination(LimitOffsetPagination):
    default_limit = 20
    max_limit = 100

    def get_paginated_response(self, data):
        return Response({
            "success": True,
            "tournaments": data,
            "pagination": {
                "total": self.count,
                "limit": self.limit,
                "offset": self.offset,
                "has_more": self.offset + self.limit < self.count,
            },
        })
