from django.http import HttpResponse
from django.urls import path, register_converter

from base62.converters import (Base62Converter, BigBase62Converter,
                               converter_for)
from base62.encoding import STD_ENCODING


register_converter(Base62Converter, 'b62')
register_converter(BigBase62Converter, 'bigb62')
register_converter(converter_for(STD_ENCODING.with_padding(6)), 'b62pad')


def show_pk(request, pk):
    return HttpResponse(str(pk))


urlpatterns = [
    path('p/<b62:pk>/', show_pk, name='post'),
    path('big/<bigb62:pk>/', show_pk, name='big'),
    path('padded/<b62pad:pk>/', show_pk, name='padded'),
]
