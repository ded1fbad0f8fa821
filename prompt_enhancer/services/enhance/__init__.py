from .service import EnhanceResult, EnhanceService, InstructionPreview

__all__ = ["EnhanceResult", "EnhanceService", "InstructionPreview"]
