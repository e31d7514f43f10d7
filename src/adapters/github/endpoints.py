"""Endpoints de usuarios de GitHub."""

from __future__ import annotations

from urllib.parse import quote

from core.domain.endpoint import APIEndpoint, HTTPMethod


class UserEndpoint:
    @staticmethod
    def get_list_user(per_page: int = 20, since: int = 100) -> APIEndpoint:
        """`GET /users` paginado por id (`since` = último id ya visto)."""

        return APIEndpoint(
            path="/users",
            method=HTTPMethod.GET,
            url_queries={
                "per_page": str(per_page),
                "since": str(since),
            },
        )

    @staticmethod
    def get_user_detail(login_username: str) -> APIEndpoint:
        # El login viaja como un único segmento de path.
        return APIEndpoint(
            path=f"/users/{quote(login_username, safe='')}",
            method=HTTPMethod.GET,
        )
