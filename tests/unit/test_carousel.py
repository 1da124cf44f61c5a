"""
Unit tests for the Carousel widget
"""
import logging

import pytest
from markupsafe import Markup

from materialserv import Carousel, InvalidConfigError
from materialserv.view import Position


@pytest.mark.widgets
class TestCarouselWidget:
    """Test Carousel initialization and rendering"""

    def test_render_items(self, view):
        """Test items merge the shared item options"""
        carousel = Carousel(
            view,
            item_options={'class': 'amber'},
            items=[
                {'content': 'One'},
                {'content': Markup('<b>Two</b>'), 'options': {'class': 'override'}},
            ],
        )

        assert carousel.render() == (
            '<div id="w0">\n'
            '<div class="carousel">\n'
            '<div class="amber carousel-item">One</div>\n'
            '<div class="override carousel-item"><b>Two</b></div>\n'
            '</div>\n'
            '</div>'
        )

    def test_item_tag_and_passthrough_attributes(self, view):
        """Test item tag and unrecognized keys become attributes"""
        html = Carousel(view, items=[{'tag': 'a', 'content': 'Link', 'href': '#one'}]).render()
        assert '<a class="carousel-item" href="#one">Link</a>' in html

    def test_plain_text_content_is_escaped(self, view):
        """Test plain strings are escaped and Markup is raw"""
        html = Carousel(view, items=[{'content': '<script>x</script>'}]).render()
        assert '&lt;script&gt;x&lt;/script&gt;' in html
        assert '<script>' not in html

    def test_caller_items_not_mutated(self, view):
        """Test rendering leaves the caller's configuration untouched"""
        items = [{'content': 'One', 'options': {'class': 'a'}}]
        fixed_item = {'tag': 'p', 'content': 'Fixed'}
        carousel = Carousel(view, items=items, fixed_item=fixed_item)
        first = carousel.render()

        assert carousel.render() == first
        assert items == [{'content': 'One', 'options': {'class': 'a'}}]
        assert fixed_item == {'tag': 'p', 'content': 'Fixed'}

    def test_fixed_item_disabled(self, view):
        """Test fixed_item=False omits the fixed item"""
        html = Carousel(view, fixed_item=False, items=[{'content': 'One'}]).render()
        assert 'carousel-fixed-item' not in html

    def test_fixed_item_before_items(self, view):
        """Test the fixed item renders ahead of the item list"""
        html = Carousel(
            view,
            fixed_item={'tag': 'p', 'content': 'Fixed', 'options': {'class': 'center'}},
            items=[{'content': 'One'}],
        ).render()

        fixed = '<p class="center carousel-fixed-item">Fixed</p>'
        assert fixed in html
        assert html.index(fixed) < html.index('carousel-item"')

    def test_default_plugin_options(self, view):
        """Test the Materialize defaults are forwarded"""
        carousel = Carousel(view)
        assert carousel.plugin_options == {
            'duration': 200, 'dist': -100, 'shift': 0, 'padding': 0, 'numVisible': 5,
            'fullWidth': False, 'indicators': False, 'noWrap': False, 'onCycleTo': None,
        }
        script = view.js[Position.END][0]
        assert "M.Carousel.init(document.getElementById('w0').querySelectorAll('.carousel')" in script
        assert '"onCycleTo": null' in script

    def test_explicit_fields_win(self, view):
        """Test convenience fields override raw plugin options"""
        carousel = Carousel(view, duration=400, num_visible=3, plugin_options={'duration': 100, 'dist': 0})
        assert carousel.plugin_options['duration'] == 400
        assert carousel.plugin_options['numVisible'] == 3
        assert carousel.plugin_options['dist'] == 0

    @pytest.mark.parametrize('kwargs', [{'full_width': True}, {'plugin_options': {'fullWidth': True}}])
    def test_full_width(self, view, kwargs):
        """Test fullWidth adds the slider modifier class"""
        carousel = Carousel(view, **kwargs)
        assert '<div class="carousel carousel-slider">' in carousel.render()
        assert carousel.plugin_options['fullWidth'] is True

    def test_on_cycle_to_callback(self, view):
        """Test callback strings are emitted as expressions"""
        Carousel(view, on_cycle_to='function(el) { console.log(el); }')
        assert '"onCycleTo": function(el) { console.log(el); }' in view.js[Position.END][0]

    def test_navigation(self, view):
        """Test prev/next controls and their click bindings"""
        html = Carousel(
            view,
            items=[{'content': 'One'}],
            navigation=[{'content': 'Prev'}, {'content': 'Next', 'options': {'class': 'btn'}}],
        ).render()

        assert '<div class="carousel-navigation">' in html
        assert '<a class="carousel-prev" href="#!">Prev</a>' in html
        assert '<a class="btn carousel-next" href="#!">Next</a>' in html
        assert html.index('carousel-navigation') > html.index('carousel-item')

        scripts = view.js[Position.END]
        assert len(scripts) == 2
        assert "M.Carousel.getInstance(root.querySelector('.carousel'))" in scripts[1]
        assert 'carousel().prev();' in scripts[1]
        assert 'carousel().next();' in scripts[1]

    def test_navigation_strings(self, view):
        """Test plain strings are accepted as navigation content"""
        html = Carousel(view, navigation=['<', '>']).render()
        assert '<a class="carousel-prev" href="#!">&lt;</a>' in html

    @pytest.mark.parametrize('navigation', [
        [{'content': 'Prev'}],
        [{'content': 'a'}, {'content': 'b'}, {'content': 'c'}],
        {'content': 'Prev'},
    ])
    def test_invalid_navigation_is_omitted(self, view, caplog, navigation):
        """Test navigation without exactly two descriptors is dropped"""
        with caplog.at_level(logging.WARNING, logger='materialserv.widgets.carousel'):
            html = Carousel(view, navigation=navigation).render()

        assert 'carousel-navigation' not in html
        assert len(view.js[Position.END]) == 1
        assert 'exactly two descriptors' in caplog.text

    def test_plugin_events(self, view):
        """Test event handlers are bound to the container"""
        Carousel(view, id='gallery', plugin_events={'click': 'onGalleryClick'})
        assert "elem.addEventListener('click', onGalleryClick);" in view.js[Position.END][1]
        assert "getElementById('gallery')" in view.js[Position.END][1]

    def test_no_init(self, view):
        """Test plugin_options=False renders markup without the init script"""
        html = Carousel(view, plugin_options=False, items=[{'content': 'One'}]).render()
        assert 'carousel-item' in html
        assert view.js[Position.END] == []
        assert list(view.asset_bundles) == ['materialize']

    def test_container_tag(self, view):
        """Test the container tag is configurable"""
        html = Carousel(view, options={'tag': 'section', 'class': 'wrapper'}).render()
        assert html.startswith('<section id="w0" class="wrapper">')
        assert html.endswith('</section>')

    def test_unknown_option(self, view):
        """Test unknown keywords raise a configuration error"""
        with pytest.raises(InvalidConfigError):
            Carousel(view, slides=[])

    def test_fixed_item_true_is_rejected(self, view):
        """Test fixed_item accepts only False or a mapping"""
        with pytest.raises(InvalidConfigError, match='fixed_item'):
            Carousel(view, fixed_item=True)
        assert view.js[Position.END] == []

    @pytest.mark.parametrize('kwargs,field', [
        ({'items': ['<img src="/a.jpg">']}, r'items\[0\]'),
        ({'items': [{'content': 'One'}, {'content': 'Two', 'options': 'big'}]}, r'items\[1\]\.options'),
        ({'fixed_item': 'Fixed'}, 'fixed_item'),
        ({'item_options': ['amber']}, 'item_options'),
        ({'carousel_options': 'wide'}, 'carousel_options'),
        ({'navigation': [{'content': 'Prev', 'options': 'x'}, 'Next']}, r'navigation\[0\]\.options'),
    ])
    def test_malformed_configuration(self, view, kwargs, field):
        """Test values of the wrong shape raise a configuration error naming the field"""
        with pytest.raises(InvalidConfigError, match=field):
            Carousel(view, **kwargs)
        assert view.js[Position.END] == []
