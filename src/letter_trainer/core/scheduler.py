"""
Temporizadores de un solo disparo para el bucle de la interfaz.

Los temporizadores no usan hilos: el bucle principal llama a run_due() en
cada frame y las callbacks se ejecutan en ese mismo hilo.
"""

import heapq
import itertools
import logging
import time


logger = logging.getLogger(__name__)


def monotonic_ms():
    """Reloj monótono en milisegundos."""
    return time.monotonic() * 1000.0


class Scheduler:
    """
    Cola de temporizadores de un solo disparo.

    Los temporizadores no se pueden cancelar individualmente; clear() los
    descarta todos al cerrar la aplicación.
    """

    def __init__(self, clock=None):
        """
        Args:
            clock (callable): Función sin argumentos que devuelve milisegundos
                (por defecto monotonic_ms; los tests inyectan un reloj falso)
        """
        self._clock = clock if clock else monotonic_ms
        self._timers = []
        self._sequence = itertools.count()  # Desempate FIFO para el mismo instante

    @property
    def pending(self):
        """Número de temporizadores que aún no han disparado."""
        return len(self._timers)

    def call_later(self, delay_ms, callback, *args):
        """
        Programa callback(*args) para dentro de delay_ms milisegundos.

        Returns:
            float: Instante (ms) en que vence el temporizador
        """
        due = self._clock() + delay_ms
        heapq.heappush(self._timers, (due, next(self._sequence), callback, args))
        return due

    def run_due(self):
        """
        Ejecuta las callbacks vencidas en orden de vencimiento.

        Una callback puede programar nuevos temporizadores; solo se ejecutan
        en esta llamada si ya han vencido.

        Returns:
            int: Número de callbacks ejecutadas
        """
        fired = 0
        now = self._clock()
        while self._timers and self._timers[0][0] <= now:
            _, _, callback, args = heapq.heappop(self._timers)
            callback(*args)
            fired += 1
        return fired

    def clear(self):
        if self._timers:
            logger.debug("Descartando %d temporizadores pendientes", len(self._timers))
        self._timers.clear()
