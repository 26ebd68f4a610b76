from fastapi import APIRouter
from .sessoes import router as sessoes_router
from .documentos import router as documentos_router
from .alunos import router as alunos_router
from .solicitacoes import router as solicitacoes_router, concluidas_router
from .comentarios import router as comentarios_router

router = APIRouter()

router.include_router(sessoes_router, prefix="/sessions", tags=["Sessões"])
router.include_router(documentos_router, prefix="/documents", tags=["Documentos"])
router.include_router(alunos_router, prefix="/students", tags=["Alunos"])
router.include_router(solicitacoes_router, prefix="/solicitations", tags=["Solicitações"])
router.include_router(concluidas_router, prefix="/finished-solicitations", tags=["Solicitações"])
router.include_router(comentarios_router, prefix="/comments", tags=["Comentários"])
