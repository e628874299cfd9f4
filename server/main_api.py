from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from logpkg.log_kcld import LogKCld
from server.api_models import BlkioRequest, BlkioResponse, NamespaceRequest, SpecifierRequest
from specparse.devices.blkio import validate_bps_device, validate_iops_device, validate_weight_device
from specparse.devices.device_spec import parse_device
from specparse.errors import SpecError
from specparse.namespaces.classifier import classify_namespace
from specparse.namespaces.modes import namespace_mode

logger = LogKCld()
# Initialize FastAPI app
app = FastAPI(title="specparse", description="Validate container resource and namespace specifiers")


@app.exception_handler(SpecError)
async def spec_error_handler(request: Request, exc: SpecError):
    logger.info(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc), "kind": exc.kind})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/validate/weight-device")
async def weight_device(request: SpecifierRequest):
    return validate_weight_device(request.value).model_dump()


@app.post("/validate/bps-device")
async def bps_device(request: SpecifierRequest):
    return validate_bps_device(request.value).model_dump()


@app.post("/validate/iops-device")
async def iops_device(request: SpecifierRequest):
    return validate_iops_device(request.value).model_dump()


@app.post("/validate/device")
async def device(request: SpecifierRequest):
    return parse_device(request.value).model_dump()


@app.post("/validate/namespace")
async def namespace(request: NamespaceRequest):
    """
    Classify a namespace specifier ("pod", "ns:<path>" or a value of the
    given kind such as "host" or "container:<id>").
    """
    ns = namespace_mode(request.kind, request.value)
    return classify_namespace(request.value, ns).model_dump(mode="json")


@app.post("/validate/blkio")
async def blkio(request: BlkioRequest):
    return BlkioResponse.from_request(request).model_dump()
