from robyn import Robyn

from robyn_menu.core import MenuItem, MenuProvider
from robyn_menu.core.site import MenuSite

app = Robyn(__file__)

current_user = {"roles": ["admin"]}

translations = {
    "de_DE": {"Home": "Zuhause", "Logout": "Abmelden", "Language": "Sprache"},
}


# 菜单切换的语言, 优先于session中的语言
settings = {"language": None}


def use_language(language: str):
    def click():
        settings["language"] = language
    return click


def translate(text: str, language: str) -> str:
    return translations.get(settings["language"] or language, {}).get(text, text)


# 启动阶段注册菜单
provider = (
    MenuProvider()
    .icon_base_class('fa')
    .default_icon_class_prefix('fa')
    .menu_item('navbar.home', {'text': 'Home', 'href': '/home', 'icon_class': 'fa-home'})
    .menu_item('navbar.language', MenuItem(text='Language', weight=5))
    .menu_item('navbar.language.en', MenuItem(text='English', click=use_language('en_US')))
    .menu_item('navbar.language.de', MenuItem(text='Deutsch', click=use_language('de_DE')))
    .menu_item('navbar.divider', MenuItem(is_divider=True, weight=9))
    .menu_item('navbar.logout', MenuItem(text='Logout', weight=10))
)

menu_manager = provider.build()

# 运行时补充配置
menu_manager.menu_item('navbar.logout').href = '/logout'
menu_manager.menu_item('navbar.admin', MenuItem(
    text='Admin',
    href='/admin',
    weight=1,
    is_visible=lambda node: 'admin' in current_user["roles"]
))

MenuSite(app, menu_manager, name='menu', translator=translate)

if __name__ == "__main__":
    app.start(host="127.0.0.1", port=8100)
