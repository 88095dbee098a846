#!/usr/bin/env python3

'''
    simple drawables (grobs) used by facet

    facet only needs sizes of drawables
        and a way to group them
    drawing them is left to the consumer of the final table

    sizes are in cm
        text is measured with `matplotlib.textpath.TextPath`
'''

from matplotlib.textpath import TextPath
from matplotlib.font_manager import FontProperties

from .size import fontsize_in_pts, convert_unit
from ._tools_facet import is_horizontal_side

__all__=['Grob', 'NullGrob', 'RectGrob', 'TextGrob', 'GTree',
         'StripGrob', 'AxisGrob', 'measure', 'text_extent']

# text metrics
def text_extent(label, fontsize=None, rotation=0):
    '''
        (width, height) of text in points

        Parameters:
            label: str
                text, maybe multiple lines or mathtext

            fontsize: None, float or str
                see `fontsize_in_pts`

            rotation: 0, 90, -90, or 180
                rotated by right angle, swap width and height for +-90
    '''
    size=fontsize_in_pts(fontsize)
    if not label:
        return 0., 0.

    lines=label.split('\n')
    w=0.
    h=0.
    for s in lines:
        ext=TextPath((0, 0), s, size=size, prop=FontProperties()).get_extents()
        w=max(w, ext.width)
        h+=max(ext.height, size)

    if rotation%180:
        w, h=h, w
    return w, h

# grobs
class Grob:
    '''
        base class of drawables
    '''
    def __init__(self, name=None):
        self.name=name

    @property
    def children(self):
        return ()

    def width_cm(self):
        return 0.

    def height_cm(self):
        return 0.

    def __repr__(self):
        return '%s(name=%s)' % (type(self).__name__, repr(self.name))

class NullGrob(Grob):
    '''
        placeholder with zero size
    '''
    pass

class RectGrob(Grob):
    '''
        rectangle filling its cell
    '''
    def __init__(self, fill=None, colour=None, name=None):
        super().__init__(name=name)
        self.fill=fill
        self.colour=colour

class TextGrob(Grob):
    '''
        a piece of text
    '''
    def __init__(self, label, fontsize=None, rotation=0, colour=None, name=None):
        super().__init__(name=name)
        self.label=str(label)
        self.fontsize=fontsize
        self.rotation=rotation
        self.colour=colour

    def _extent_cm(self):
        w, h=text_extent(self.label, self.fontsize, self.rotation)
        u=convert_unit('points', 'cm')
        return w*u, h*u

    def width_cm(self):
        return self._extent_cm()[0]

    def height_cm(self):
        return self._extent_cm()[1]

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, repr(self.label))

class GTree(Grob):
    '''
        ordered group of grobs, drawn first to last

        size is the max of children
    '''
    def __init__(self, children=(), name=None):
        super().__init__(name=name)
        self._children=tuple(children)

    @property
    def children(self):
        return self._children

    def width_cm(self):
        return max([c.width_cm() for c in self._children], default=0.)

    def height_cm(self):
        return max([c.height_cm() for c in self._children], default=0.)

    def __len__(self):
        return len(self._children)

    def __repr__(self):
        return '%s(%s, name=%s)' % (type(self).__name__,
                    list(self._children), repr(self.name))

class StripGrob(GTree):
    '''
        strip: background rect and text, with padding
    '''
    def __init__(self, label, horizontal=True, theme=None, name=None):
        rotation=0 if horizontal else -90
        kws=dict(fill=None)
        kws_text=dict(fontsize=None)
        pad=0.
        if theme is not None:
            kws['fill']=theme.strip_background
            kws_text.update(fontsize=theme.strip_text_size,
                            colour=theme.strip_text_colour)
            pad=theme.strip_pad

        self.text=TextGrob(label, rotation=rotation, **kws_text)
        self.horizontal=horizontal
        self._pad_cm=pad*convert_unit('points', 'cm')

        super().__init__([RectGrob(**kws), self.text], name=name)

    @property
    def label(self):
        return self.text.label

    def width_cm(self):
        return self.text.width_cm()+2*self._pad_cm

    def height_cm(self):
        return self.text.height_cm()+2*self._pad_cm

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, repr(self.label))

class AxisGrob(Grob):
    '''
        axis: ticks at breaks with labels

        only the size perpendicular to axis is measured,
            that is height for 'bottom'/'top', width for 'left'/'right'
    '''
    def __init__(self, side, breaks, labels=None, theme=None, name=None):
        super().__init__(name=name)

        self.side=side
        self.horizontal=is_horizontal_side(side)
        self.breaks=list(breaks)
        if labels is None:
            labels=['%g' % b for b in self.breaks]
        self.labels=[str(t) for t in labels]
        assert len(self.labels)==len(self.breaks), \
            'mismatch between breaks and labels'

        self.fontsize=None
        self._tick_cm=self._pad_cm=0.
        if theme is not None:
            u=convert_unit('points', 'cm')
            self.fontsize=theme.axis_text_size
            self._tick_cm=theme.axis_tick_length*u
            self._pad_cm=theme.axis_tick_pad*u

    def _label_cm(self, k):
        u=convert_unit('points', 'cm')
        sizes=[text_extent(t, self.fontsize)[k]*u for t in self.labels]
        return max(sizes, default=0.)

    def width_cm(self):
        if self.horizontal:
            return 0.
        return self._tick_cm+self._pad_cm+self._label_cm(0)

    def height_cm(self):
        if not self.horizontal:
            return 0.
        return self._tick_cm+self._pad_cm+self._label_cm(1)

    def __repr__(self):
        return '%s(%s, %s)' % (type(self).__name__, repr(self.side), self.labels)

def measure(grob):
    '''
        (width, height) of grob in cm
    '''
    return grob.width_cm(), grob.height_cm()
