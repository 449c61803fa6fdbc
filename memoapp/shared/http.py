from fastapi.responses import JSONResponse

def error_response(message: str, status: int = 400) -> JSONResponse:
    # flat {"error": ...} body, the shape the viewer reads
    return JSONResponse(status_code=status, content={"error": message})
