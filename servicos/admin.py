# servicos/admin.py
from django.contrib import admin, messages

from .forms import ServicoForm
from .models import Servico


@admin.register(Servico)
class ServicoAdmin(admin.ModelAdmin):
    form = ServicoForm

    # Lista
    list_display = ("nome", "preco", "duracao_min", "ativo", "updated_at")
    list_filter = ("ativo",)
    search_fields = ("nome", "descricao")
    ordering = ("nome",)
    list_per_page = 50

    # Edição rápida na listagem
    list_editable = ("preco", "duracao_min", "ativo")

    # Form
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("nome", "descricao", "imagem_url")}),
        ("Preço e duração", {"fields": ("preco", "duracao_min")}),
        ("Status", {"fields": ("ativo",)}),
        ("Auditoria", {"classes": ("collapse",), "fields": ("created_at", "updated_at")}),
    )

    actions = ("ativar", "desativar")

    # Ações
    @admin.action(description="Ativar selecionados")
    def ativar(self, request, queryset):
        n = queryset.update(ativo=True)
        self.message_user(request, f"{n} serviço(s) ativado(s).", level=messages.SUCCESS)

    @admin.action(description="Desativar selecionados")
    def desativar(self, request, queryset):
        n = queryset.update(ativo=False)
        self.message_user(request, f"{n} serviço(s) desativado(s).", level=messages.SUCCESS)
