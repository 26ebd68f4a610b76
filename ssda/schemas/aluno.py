"""
Schemas Pydantic para alunos

As mensagens de validação são exibidas diretamente ao lado de cada campo
do formulário de edição.
"""
import re
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional

PHONE_REGEX = re.compile(
    r"^(?:(?:\+|00)?(55)\s?)?(?:\(?([1-9][0-9])\)?\s?)?(?:((?:9\d|[2-9])\d{3})\-?(\d{4}))$"
)
EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

_MENSAGENS_OBRIGATORIO = {
    "ra": "RA obrigatório",
    "name": "Nome obrigatório",
    "email": "E-mail obrigatório",
    "phone": "Telefone obrigatório",
    "course": "Curso obrigatório",
}


def _erro(mensagem: str) -> PydanticCustomError:
    return PydanticCustomError("campo_invalido", mensagem)


class StudentUpdate(BaseModel):
    """Registro completo do aluno, enviado na edição pelo funcionário"""
    ra: str = Field(..., max_length=20, description="Registro acadêmico")
    name: str = Field(..., max_length=200)
    email: str = Field(..., max_length=200)
    phone: str = Field(..., max_length=20)
    cellphone: Optional[str] = Field(None, max_length=20)
    course: str = Field(..., max_length=100)
    period: int = Field(..., description="Período / ciclo (apenas número)")

    @field_validator('ra', 'name', 'email', 'phone', 'course', mode='before')
    @classmethod
    def obrigatorio(cls, v, info):
        if v is None or not str(v).strip():
            raise _erro(_MENSAGENS_OBRIGATORIO[info.field_name])
        return str(v).strip()

    @field_validator('email')
    @classmethod
    def email_valido(cls, v: str) -> str:
        if not EMAIL_REGEX.match(v):
            raise _erro("Insira um e-mail válido")
        return v

    @field_validator('phone')
    @classmethod
    def telefone_valido(cls, v: str) -> str:
        if not PHONE_REGEX.match(v):
            raise _erro("Este número não é válido")
        return v

    @field_validator('period', mode='before')
    @classmethod
    def periodo_valido(cls, v) -> int:
        if v is None or str(v).strip() == "":
            raise _erro("Período obrigatório")
        try:
            numero = float(str(v).strip())
        except ValueError:
            raise _erro("Insira apenas números inteiros")
        if not numero.is_integer():
            raise _erro("Insira apenas números inteiros")
        if numero <= 0:
            raise _erro("Insira um período válido")
        return int(numero)


class StudentResponse(BaseModel):
    id: int
    ra: str
    name: str
    email: str
    phone: str
    cellphone: Optional[str] = None
    course: str
    period: int

    model_config = ConfigDict(from_attributes=True)
