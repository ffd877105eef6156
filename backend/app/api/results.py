"""
Catalog response outcomes

The catalog controller returns one of these values instead of building
HTTP responses itself. The router renders them with to_response().
"""
from typing import Any, Dict

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """Base outcome of a catalog request"""

    status_code: int

    def to_response(self, request: Request) -> Response:
        return Response(status_code=self.status_code)


class OkResult(ActionResult):
    """200 OK, with the value as JSON body when there is one"""

    status_code: int = status.HTTP_200_OK
    value: Any = None

    def to_response(self, request: Request) -> Response:
        if self.value is None:
            return Response(status_code=self.status_code)
        return JSONResponse(status_code=self.status_code, content=jsonable_encoder(self.value))


class CreatedAtRouteResult(ActionResult):
    """201 Created, Location header pointing at a named route"""

    status_code: int = status.HTTP_201_CREATED
    route_name: str
    route_values: Dict[str, Any] = Field(default_factory=dict)
    value: Any = None

    def location(self, request: Request) -> str:
        path_params = {key: str(value) for key, value in self.route_values.items()}
        return str(request.url_for(self.route_name, **path_params))

    def to_response(self, request: Request) -> Response:
        return JSONResponse(
            status_code=self.status_code,
            content=jsonable_encoder(self.value),
            headers={"Location": self.location(request)}
        )


class NotFoundResult(ActionResult):
    """404 Not Found, no body"""

    status_code: int = status.HTTP_404_NOT_FOUND
