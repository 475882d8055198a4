import json
import logging
from typing import Callable, Optional
from urllib.parse import unquote

from robyn import Robyn, Request, Response, jsonify

from .exceptions import MalformedNameError
from .manager import MenuManager

logger = logging.getLogger(__name__)

Translator = Callable[[str, str], str]


class MenuSite:
    """菜单站点, 将菜单树以JSON接口挂载到Robyn应用"""

    def __init__(
        self,
        app: Robyn,
        manager: MenuManager,
        name: str = 'menu',
        translator: Optional[Translator] = None,
        default_language: str = 'en_US'
    ):
        """
        初始化菜单站点

        :param app: Robyn应用实例
        :param manager: 菜单管理器
        :param name: 路由前缀
        :param translator: 菜单文本翻译函数 (text, language) -> text, 为None时原样输出
        :param default_language: cookie中没有语言设置时使用的语言
        """
        self.app = app
        self.manager = manager
        self.name = name
        self.translator = translator
        self.default_language = default_language

        self._setup_routes()

    def _setup_routes(self):
        """设置路由"""
        @self.app.get(f"/{self.name}/tree")
        async def menu_forest(request: Request):
            return self.render_tree(request, None)

        @self.app.get(f"/{self.name}/tree/:menu_name")
        async def menu_tree(request: Request):
            menu_name = unquote(request.path_params.get("menu_name") or "")
            return self.render_tree(request, menu_name)

        @self.app.get(f"/{self.name}/config")
        async def menu_config(request: Request):
            return jsonify(self.manager.options.to_dict())

    def render_tree(self, request: Request, menu_name: Optional[str]):
        """获取菜单树并序列化"""
        try:
            tree = self.manager.menu_item_tree(menu_name)
        except MalformedNameError as e:
            logger.warning("Rejected menu tree request: %s", e)
            return Response(
                status_code=400,
                description=json.dumps({"error": str(e)}),
                headers={"Content-Type": "application/json"}
            )

        language = self._get_language(request)
        translate = None
        if self.translator:
            def translate(text):
                return self.translator(text, language)
        return jsonify(tree.to_dict(translate))

    def _get_language(self, request: Request) -> str:
        """从session cookie获取当前语言"""
        session_data = request.headers.get('Cookie')
        if not session_data:
            return self.default_language

        session_dict = {}
        for item in session_data.split(";"):
            if "=" in item:
                key, value = item.split("=", 1)
                session_dict[key.strip()] = value.strip()

        session = session_dict.get("session")
        if not session:
            return self.default_language

        try:
            data = json.loads(session)
        except json.JSONDecodeError:
            return self.default_language
        if not isinstance(data, dict):
            return self.default_language
        return data.get("language", self.default_language)
