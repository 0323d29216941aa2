"""
Descarga en segundo plano de las imágenes ilustrativas.

Las imágenes son URLs remotas; se descargan con httpx en un hilo aparte y
se decodifican con OpenCV. Si una imagen falla, el renderizador dibuja un
marcador en su lugar.
"""

import logging
import threading

import cv2
import httpx
import numpy as np


logger = logging.getLogger(__name__)


class ImageLibrary:
    """
    Caché de imágenes por posición del abecedario.

    prefetch() lanza un hilo que descarga todas las imágenes en orden; get()
    devuelve la imagen (BGR o BGRA) si ya está disponible, o None.
    """

    def __init__(self, timeout=5.0, client=None):
        """
        Args:
            timeout (float): Timeout por petición en segundos
            client (httpx.Client): Cliente HTTP (los tests inyectan uno con MockTransport)
        """
        self._client = client if client else httpx.Client(timeout=timeout, follow_redirects=True)
        self._images = {}
        self._lock = threading.Lock()
        self._thread = None
        self._closed = threading.Event()

    def get(self, index):
        with self._lock:
            return self._images.get(index)

    def prefetch(self, records):
        """Descarga en segundo plano las imágenes de los registros dados."""
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._prefetch_worker, args=(tuple(records),), daemon=True)
        self._thread.start()

    def _prefetch_worker(self, records):
        self.load_all(records)
        # Si close() no pudo esperar a este hilo, el cliente se cierra aquí
        if self._closed.is_set():
            self._client.close()

    def load_all(self, records):
        """
        Descarga y decodifica todas las imágenes (bloqueante).

        Returns:
            int: Número de imágenes cargadas
        """
        loaded = 0
        for index, record in enumerate(records):
            if self._closed.is_set():
                break
            image = self.fetch(record.image_url)
            if image is None:
                continue
            with self._lock:
                self._images[index] = image
            loaded += 1
        logger.info("Imágenes cargadas: %d/%d", loaded, len(records))
        return loaded

    def fetch(self, url):
        if self._closed.is_set():
            return None
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("No se pudo descargar %s: %s", url, e)
            return None

        data = np.frombuffer(response.content, dtype=np.uint8)
        image = cv2.imdecode(data, cv2.IMREAD_UNCHANGED) if data.size else None
        if image is None:
            logger.warning("Imagen no decodificable: %s", url)
        return image

    def close(self, timeout=1.0):
        """
        Detiene la descarga y libera el cliente HTTP.

        Si queda una petición en curso tras el timeout, es el hilo de descarga
        quien cierra el cliente al terminarla.
        """
        self._closed.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.debug("Descarga de imágenes en curso; el hilo cerrará el cliente")
                return
        self._client.close()
