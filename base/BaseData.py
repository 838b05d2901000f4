from typing import Any


class BaseData:

    _TYPE_FILTER = (int, str, bool, float, list, dict, tuple)

    def __init__(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_vars()})"

    def get_vars(self) -> dict[str, Any]:
        return {
            k: v
            for k, v in vars(self).items()
            if v is None or isinstance(v, BaseData._TYPE_FILTER)
        }

    # 只写入已声明的字段，忽略未知键与类型不符的值
    def set_vars(self, data: dict[str, Any]) -> None:
        current = vars(self)
        for k, v in data.items():
            if k not in current:
                continue
            if current[k] is not None and not isinstance(v, type(current[k])):
                continue
            setattr(self, k, v)
