"""
Unit tests for the page rendering context and asset bundles
"""
from materialserv import MaterialBox, Parallax, View
from materialserv.assets import AssetBundle, materialize_asset
from materialserv.config import AssetConfig, MaterializeConfig, WidgetConfig
from materialserv.view import Position


class TestView:
    """Test asset and script queues"""

    def test_ids_follow_instantiation_order(self, view):
        """Test generated ids are sequential per page"""
        assert [view.next_id(), view.next_id(), view.next_id()] == ['w0', 'w1', 'w2']

    def test_id_prefix_from_config(self):
        """Test the id prefix is configurable"""
        view = View(MaterializeConfig(widgets=WidgetConfig(id_prefix='mat-')))
        assert view.next_id() == 'mat-0'

    def test_asset_bundle_registered_once(self, view):
        """Test bundles are deduplicated by name"""
        first = view.register_asset_bundle(AssetBundle('materialize', css=['a.css']))
        second = view.register_asset_bundle(AssetBundle('materialize', css=['b.css']))

        assert second is first
        assert view.css_files() == ['a.css']

    def test_dependencies_registered_first(self, view):
        """Test bundle dependencies precede the bundle"""
        base = AssetBundle('base', js=['base.js'])
        view.register_asset_bundle(AssetBundle('app', js=['app.js'], depends=[base]))

        assert list(view.asset_bundles) == ['base', 'app']
        assert view.js_files() == ['base.js', 'app.js']

    def test_register_js_appends(self, view):
        """Test fragments without a key are never deduplicated"""
        view.register_js('init();')
        view.register_js('init();')
        assert view.js[Position.END] == ['init();', 'init();']

    def test_register_js_key_replaces(self, view):
        """Test a keyed fragment replaces the earlier one"""
        view.register_js('a();', key='setup')
        view.register_js('b();')
        view.register_js('c();', key='setup')
        assert view.js[Position.END] == ['c();', 'b();']

    def test_positions(self, view):
        """Test fragments are kept per position"""
        view.register_js('head();', Position.HEAD)
        view.register_js('begin();', 'begin')

        assert 'head();' in view.render_head()
        assert view.render_body_begin() == '<script>\nbegin();\n</script>'
        assert view.render_body_end() == ''

    def test_render_head_and_body_end(self, view):
        """Test rendered asset tags and the end-of-body script block"""
        view.register_asset_bundle(materialize_asset(view.config.assets))
        view.register_js('first();')
        view.register_js('second();')

        assert view.render_head() == '<link href="/static/materialize/css/materialize.min.css" rel="stylesheet">'
        assert view.render_body_end() == (
            '<script src="/static/materialize/js/materialize.min.js"></script>\n'
            '<script>\nfirst();\nsecond();\n</script>'
        )

    def test_clear(self, view):
        """Test clearing resets queues and ids"""
        view.next_id()
        view.register_asset_bundle(AssetBundle('x'))
        view.register_js('x();', key='x')
        view.clear()

        assert view.asset_bundles == {}
        assert view.js[Position.END] == []
        assert view.next_id() == 'w0'

    def test_two_widgets_register_bundle_once(self, view):
        """Test the Materialize bundle is queued once per page"""
        Parallax(view, image='/bg.jpg')
        MaterialBox(view, image='/photo.jpg')

        assert list(view.asset_bundles) == ['materialize']
        assert view.js_files() == ['/static/materialize/js/materialize.min.js']
        assert len(view.js[Position.END]) == 2


class TestAssetBundle:
    """Test asset URL resolution"""

    def test_relative_paths_join_base_url(self):
        """Test bundle files resolve against the base URL"""
        bundle = AssetBundle('x', base_url='/static/lib', css=['/css/a.css'], js=['js/a.js'])
        assert bundle.css_urls() == ['/static/lib/css/a.css']
        assert bundle.js_urls() == ['/static/lib/js/a.js']

    def test_absolute_urls_unchanged(self):
        """Test absolute URLs are kept as given"""
        bundle = AssetBundle('x', base_url='/static/', js=['https://cdn.example.com/a.js', '//cdn.example.com/b.js'])
        assert bundle.js_urls() == ['https://cdn.example.com/a.js', '//cdn.example.com/b.js']

    def test_cdn(self):
        """Test the Materialize bundle uses the CDN when enabled"""
        bundle = materialize_asset(AssetConfig(use_cdn=True, cdn_url='https://cdn.example.com/materialize/'))
        assert bundle.css_urls() == ['https://cdn.example.com/materialize/css/materialize.min.css']
        assert bundle.js_urls() == ['https://cdn.example.com/materialize/js/materialize.min.js']
