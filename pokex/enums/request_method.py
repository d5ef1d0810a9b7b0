from enum import StrEnum


class RequestMethod(StrEnum):
    GET = 'GET'
    POST = 'POST'
