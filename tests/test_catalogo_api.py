"""
Endpoints públicos de catálogo e configurações do site.
"""
from decimal import Decimal

import pytest
from django.urls import reverse

from configuracoes.forms import ConfiguracaoSiteForm
from configuracoes.models import ConfiguracaoSite
from produtos.models import Produto
from servicos.forms import ServicoForm
from servicos.models import Servico

pytestmark = pytest.mark.django_db


def test_servicos_so_ativos(api_client):
    Servico.objects.create(nome="Teste desativado", duracao_min=30, ativo=False)
    resp = api_client.get(reverse("api_servicos:lista"))
    assert resp.status_code == 200
    nomes = [s["nome"] for s in resp.data]
    assert "Teste desativado" not in nomes
    assert "Corte feminino" in nomes                    # carga inicial
    corte = next(s for s in resp.data if s["nome"] == "Corte feminino")
    assert corte["duracao_min"] == 60
    assert corte["duracao_label"] == "1h"


def test_produtos_so_ativos(api_client):
    Produto.objects.create(nome="Shampoo", preco=Decimal("39.90"))
    Produto.objects.create(nome="Máscara antiga", preco=Decimal("10.00"), ativo=False)
    resp = api_client.get(reverse("api_produtos:lista"))
    assert resp.status_code == 200
    assert [p["nome"] for p in resp.data] == ["Shampoo"]


def test_configuracao_publica_nao_expoe_chave(api_client, site):
    site.pix_chave = "12345678909"
    site.save()
    resp = api_client.get(reverse("api_configuracoes:publica"))
    assert resp.status_code == 200
    assert resp.data["telefone"] == "5583999990000"
    assert resp.data["pix_disponivel"] is True
    assert "pix_chave" not in resp.data


def test_carregar_e_linha_unica():
    a = ConfiguracaoSite.carregar()
    b = ConfiguracaoSite.carregar()
    assert a.pk == b.pk == 1
    assert ConfiguracaoSite.objects.count() == 1


def _dados_config(**extra):
    dados = {
        "telefone": "(83) 99999-0000",
        "instagram": "@salao",
        "endereco": "Rua das Flores, 10",
        "banner_url": "",
        "pix_chave": "",
        "pix_recebedor": "",
        "pix_cidade": "João Pessoa",
    }
    dados.update(extra)
    return dados


def test_form_configuracao_normaliza_telefone():
    form = ConfiguracaoSiteForm(data=_dados_config())
    assert form.is_valid(), form.errors
    assert form.cleaned_data["telefone"] == "5583999990000"
    assert form.cleaned_data["pix_chave"] is None


def test_form_configuracao_rejeita_chave_pix():
    form = ConfiguracaoSiteForm(data=_dados_config(pix_chave="não é chave"))
    assert not form.is_valid()
    assert "pix_chave" in form.errors


def test_form_configuracao_exige_instagram():
    form = ConfiguracaoSiteForm(data=_dados_config(instagram="  "))
    assert not form.is_valid()
    assert "instagram" in form.errors


def test_form_servico_valida_duracao():
    form = ServicoForm(data={"nome": "Teste nova", "preco": "10.00", "duracao_min": "0", "ativo": True})
    assert not form.is_valid()
    assert "duracao_min" in form.errors
