# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: greeting page."""

from fastapi import APIRouter
from starlette.responses import HTMLResponse

router = APIRouter(tags=["Hello"])

HELLO_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Hello</title>
</head>
<body>
    <p>{data}</p>
</body>
</html>
"""


@router.get("/hello", response_class=HTMLResponse)
def hello():
    return HELLO_PAGE.format(data="hello!!")
