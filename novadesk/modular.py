"""Registries for loadable kernel modules, kernel services and filesystems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Mapping

TRUSTED_SIGNATURE = "trusted_module_signature"

Hook = Callable[[], Any]


class ModuleType(Enum):
    """Kinds of kernel module."""

    DRIVER = "driver"
    FILESYSTEM = "filesystem"
    SCHEDULER = "scheduler"
    OTHER = "other"


class ServiceType(Enum):
    """Kinds of kernel service."""

    DRIVER = "driver"
    IPC = "ipc"
    MEMORY = "memory"
    SCHEDULER = "scheduler"
    OTHER = "other"


class ModuleError(Exception):
    """Base class for module, service and filesystem registry errors."""


class SignatureError(ModuleError):
    """The module does not carry the trusted signature."""


class ModulePermissionError(ModuleError):
    """The module's type may not be loaded."""


class ModuleInitError(ModuleError):
    """The module's init hook failed."""


class ModuleNotFoundInRegistry(ModuleError, LookupError):
    """No entry with the given name is registered."""


class DeinitError(ModuleError):
    """The module's deinit hook failed; the module stays registered.

    ``rolled_back`` tells whether re-running init afterwards succeeded.
    """

    def __init__(self, name: str, rolled_back: bool) -> None:
        outcome = "rolled back" if rolled_back else "isolated"
        super().__init__(f"deinit failed for {name}; module {outcome}")
        self.name = name
        self.rolled_back = rolled_back


@dataclass
class KernelModule:
    """A loadable module; its hooks signal failure by raising."""

    name: str
    module_type: ModuleType
    init: Hook | None
    deinit: Hook | None = None
    signature: str | None = None


class ModuleRegistry:
    """Loaded modules, newest first."""

    def __init__(self) -> None:
        self._modules: list[KernelModule] = []

    @staticmethod
    def _signature_ok(module: KernelModule) -> bool:
        return module.signature is not None and module.signature == TRUSTED_SIGNATURE

    @staticmethod
    def _permitted(module: KernelModule) -> bool:
        return module.module_type in (ModuleType.DRIVER, ModuleType.FILESYSTEM)

    def register(self, module: KernelModule) -> None:
        """Verify, initialise and load a module."""
        if module is None or module.init is None:
            raise ModuleError("module has no init hook")
        if not self._signature_ok(module):
            print(f"[Security] Module signature verification failed for {module.name}")
            raise SignatureError(f"signature verification failed for {module.name}")
        if not self._permitted(module):
            print(f"[Security] Permission denied for module {module.name}")
            raise ModulePermissionError(f"permission denied for module {module.name}")
        try:
            module.init()
        except Exception as exc:
            raise ModuleInitError(f"init failed for {module.name}") from exc
        self._modules.insert(0, module)

    def unregister(self, name: str) -> None:
        """Deinitialise and unload a module, rolling back if deinit fails."""
        module = self.find(name)
        if module is None:
            raise ModuleNotFoundInRegistry(name)
        if module.deinit is not None:
            try:
                module.deinit()
            except Exception as exc:
                print(f"[Recovery] Deinit failed for {module.name}, attempting rollback")
                rolled_back = False
                if module.init is not None:
                    try:
                        module.init()
                        rolled_back = True
                    except Exception:
                        rolled_back = False
                if rolled_back:
                    print(f"[Recovery] Rollback succeeded for {module.name}")
                else:
                    print(f"[Recovery] Rollback failed for {module.name}, isolating module")
                raise DeinitError(module.name, rolled_back) from exc
        self._modules.remove(module)

    def find(self, name: str) -> KernelModule | None:
        """Return the loaded module with this name, or None."""
        return next((m for m in self._modules if m.name == name), None)

    def recover(self, name: str) -> bool:
        """Restart a failed module; return whether the restart succeeded."""
        print(f"[Recovery] Module failure: {name}")
        module = self.find(name)
        if module is not None and module.deinit is not None:
            try:
                module.deinit()
            except Exception:
                pass
        if module is not None and module.init is not None:
            try:
                module.init()
            except Exception:
                pass
            else:
                print(f"[Recovery] Module {name} restarted successfully.")
                return True
        print(f"[Recovery] Could not restart module {name}. Isolating.")
        return False

    def __iter__(self) -> Iterator[KernelModule]:
        return iter(list(self._modules))


@dataclass
class KernelService:
    """A kernel service with start and stop hooks."""

    name: str
    service_type: ServiceType
    start: Hook | None
    stop: Hook | None = None


class ServiceRegistry:
    """Registered services, newest first."""

    def __init__(self) -> None:
        self.services: list[KernelService] = []

    def register(self, service: KernelService) -> None:
        """Add a service; it must have a start hook."""
        if service is None or service.start is None:
            raise ModuleError("service has no start hook")
        self.services.insert(0, service)

    def unregister(self, name: str) -> None:
        """Remove the service with this name."""
        service = next((s for s in self.services if s.name == name), None)
        if service is None:
            raise ModuleNotFoundInRegistry(name)
        self.services.remove(service)


@dataclass
class FsModule:
    """A filesystem driver: a name and its operations keyed by name."""

    name: str
    ops: Mapping[str, Callable[..., Any]] | None


class FsRegistry:
    """Registered filesystems, newest first."""

    def __init__(self) -> None:
        self.filesystems: list[FsModule] = []

    def register(self, fs: FsModule) -> None:
        """Add a filesystem; it must provide its operations."""
        if fs is None or fs.ops is None:
            raise ModuleError("filesystem has no operations")
        self.filesystems.insert(0, fs)

    def unregister(self, name: str) -> None:
        """Remove the filesystem with this name."""
        fs = self.find(name)
        if fs is None:
            raise ModuleNotFoundInRegistry(name)
        self.filesystems.remove(fs)

    def find(self, name: str) -> FsModule | None:
        """Return the filesystem with this name, or None."""
        return next((f for f in self.filesystems if f.name == name), None)