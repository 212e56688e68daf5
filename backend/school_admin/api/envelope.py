"""Success envelope shared by every route: {success: true, data | message}."""


def ok(data) -> dict:
    return {"success": True, "data": data}


def ok_message(message: str) -> dict:
    return {"success": True, "message": message}
