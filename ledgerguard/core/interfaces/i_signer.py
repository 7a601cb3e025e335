# ledgerguard/core/interfaces/i_signer.py

from abc import ABC, abstractmethod

class ISigner(ABC):
    """
    [Abstracción de Seguridad]
    Contrato que define la capacidad de firmar digitalmente.

    Permite desacoplar la lógica de construcción de transacciones
    del almacenamiento sensible de las claves privadas.
    """

    @abstractmethod
    def sign(self, message: bytes) -> str:
        """
        Firma criptográficamente un payload.

        Args:
            message: Los bytes canónicos a firmar (payload firmable).

        Returns:
            str: La firma ECDSA en formato hexadecimal (DER).
        """
        pass

    @abstractmethod
    def get_public_key(self) -> str:
        """
        Expone la identidad pública del firmante.

        Returns:
            str: Clave Pública en formato hexadecimal.
        """
        pass
