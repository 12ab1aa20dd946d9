from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    success: bool = True
    token: str


class LoginFailure(BaseModel):
    success: bool = False
    message: str


class Acknowledgement(BaseModel):
    success: bool = True
