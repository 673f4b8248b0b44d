from pathlib import Path

from loguru import logger

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .decorators import ensure_loaded
from .models import CallSite, JavaClass, JavaMethod
from .program_model import ProgramModel
from .schemas import ProgramModelFile
from .types_defs import ModelMetadata, ModelSummary


class ModelLoader:
    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        self._data: ProgramModelFile | None = None
        self._model: ProgramModel | None = None

    def _ensure_loaded(self) -> None:
        if self._model is None:
            self.load()

    def load(self) -> None:
        if not self.file_path.exists():
            raise FileNotFoundError(ex.MODEL_FILE_NOT_FOUND.format(path=self.file_path))

        logger.info(ls.LOADING_MODEL.format(path=self.file_path))
        self._data = ProgramModelFile.model_validate_json(
            self.file_path.read_text(encoding=cs.ENCODING_UTF8)
        )
        model = self._data.to_model()
        model.validate()
        self._model = model

        logger.info(
            ls.LOADED_MODEL.format(
                classes=len(model.classes),
                methods=len(model.methods),
                calls=len(model.calls),
            )
        )

    @property
    def model(self) -> ProgramModel:
        self._ensure_loaded()
        assert self._model is not None, ex.MODEL_NOT_LOADED
        return self._model

    @property
    def metadata(self) -> ModelMetadata:
        self._ensure_loaded()
        assert self._data is not None, ex.MODEL_NOT_LOADED
        return ModelMetadata(**self._data.metadata)  # type: ignore[typeddict-item]

    @ensure_loaded
    def find_class(self, name: str) -> JavaClass | None:
        return self.model.get_class(name)

    @ensure_loaded
    def find_method(self, full_name: str) -> JavaMethod | None:
        return self.model.get_method(full_name)

    @ensure_loaded
    def calls_to(self, full_name: str) -> list[CallSite]:
        return list(self.model.calls_to(self.model.require_method(full_name)))

    def summary(self) -> ModelSummary:
        return self.model.summary()


def load_model(file_path: str | Path) -> ProgramModel:
    loader = ModelLoader(file_path)
    return loader.model


def export_model(
    model: ProgramModel, file_path: str | Path, source: str | None = None
) -> Path:
    path = Path(file_path)
    logger.info(ls.EXPORTING_MODEL.format(path=path))
    payload = ProgramModelFile.from_model(model, source=source)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload.model_dump_json(indent=2), encoding=cs.ENCODING_UTF8)
    logger.success(
        ls.EXPORTED_MODEL.format(
            classes=len(payload.classes),
            methods=len(payload.methods),
            calls=len(payload.calls),
        )
    )
    return path
