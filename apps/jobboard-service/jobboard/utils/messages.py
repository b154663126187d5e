"""
User-facing error messages.

Every client error is returned as ``{"message": ...}`` in Brazilian
Portuguese; the texts live here so routers and handlers share them.
"""

CANDIDATE_NOT_FOUND = "Candidato não encontrado"
COMPANY_NOT_FOUND = "Empresa não encontrada"
JOB_NOT_FOUND = "Vaga de emprego não encontrada"

CANDIDATE_ID_REQUIRED = "candidateId é obrigatório"
CANDIDATE_ALREADY_APPLIED = "Candidato já cadastrado"
EMAIL_ALREADY_REGISTERED = "E-mail já cadastrado"

RESOURCE_NOT_FOUND = "Recurso não encontrado"
METHOD_NOT_ALLOWED = "Método não permitido"
INVALID_BODY = "Corpo da requisição inválido"
INTERNAL_ERROR = "Erro interno do servidor"


def required(field: str) -> str:
    return f"{field} é obrigatório"


def invalid(field: str) -> str:
    return f"{field} inválido"
