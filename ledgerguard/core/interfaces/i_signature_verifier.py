# ledgerguard/core/interfaces/i_signature_verifier.py

from abc import ABC, abstractmethod

class ISignatureVerifier(ABC):
    """
    [Abstracción de Seguridad]
    Contrato de verificación criptográfica consumido por el validador.
    """

    @abstractmethod
    def verify(self, message: bytes, signature: str, claimed_owner: str) -> bool:
        """
        Comprueba si 'signature' es auténtica para 'message' bajo la identidad 'claimed_owner'.

        Args:
            message: Payload firmable de la transacción (bytes canónicos).
            signature: Firma en formato hexadecimal.
            claimed_owner: Clave pública (hex) que el input declara como dueña.

        Returns:
            bool: False para firmas inválidas o mal formadas. No lanza por datos corruptos.
        """
        pass
