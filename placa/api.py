"""
Placa FastAPI Server

HTTP endpoints for reading and validating license plates.
"""

from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, status
from pydantic import BaseModel

from placa.exceptions import ImagePayloadError, NoProviderConfiguredError, PlateRecognitionError
from placa.reader import PlateReader, get_reader


class ReadPlateRequest(BaseModel):
    """Image to read, base64 with optional data URL prefix"""
    base64Image: Optional[str] = None


class ValidatePlateRequest(BaseModel):
    plate: Optional[str] = None


class ReadPlateLocalRequest(BaseModel):
    plateText: Optional[str] = None


class ValidatePlateResponse(BaseModel):
    isValid: bool
    formattedPlate: str
    plate: str


class PlateResultResponse(BaseModel):
    plate: str
    confidence: float
    country: str
    state: str
    isValid: bool
    format: str


router = APIRouter(prefix="/api/ocr", tags=["OCR"])


@router.post("/read-plate", response_model=PlateResultResponse)
def read_plate(request: ReadPlateRequest, reader: PlateReader = Depends(get_reader)):
    """Read a plate from an uploaded image"""
    if not request.base64Image:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image is required")

    try:
        result = reader.read_plate(request.base64Image)
    except ImagePayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except NoProviderConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except PlateRecognitionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error processing image: {e.message}",
        )

    return result.to_dict()


@router.post("/validate-plate", response_model=ValidatePlateResponse)
def validate_plate(request: ValidatePlateRequest, reader: PlateReader = Depends(get_reader)):
    """Check a plate string and return its display form"""
    if not request.plate:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Plate is required")
    return reader.validate_plate(request.plate)


@router.post("/read-plate-local", response_model=PlateResultResponse)
def read_plate_local(request: ReadPlateLocalRequest, reader: PlateReader = Depends(get_reader)):
    """Validate a plate typed in manually"""
    if not request.plateText:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Plate text is required")
    return reader.read_plate_text(request.plateText).to_dict()


# FastAPI app
app = FastAPI(
    title="Placa API",
    description="Brazilian license plate recognition and validation",
    version="1.0.0",
)
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "healthy"}
