"""
Controle de respostas fora de ordem.

Cada ação retira um número antes de enviar a requisição; ao receber a
resposta, só aplica o resultado se nenhum pedido mais novo da mesma ação
tiver sido emitido nesse meio tempo.
"""
import itertools


class GuardaSequencia:
    def __init__(self):
        self._contador = itertools.count(1)
        self._ultimos: dict[str, int] = {}

    def emitir(self, acao: str) -> int:
        numero = next(self._contador)
        self._ultimos[acao] = numero
        return numero

    def vigente(self, acao: str, numero: int) -> bool:
        return self._ultimos.get(acao) == numero
