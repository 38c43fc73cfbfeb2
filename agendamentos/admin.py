# agendamentos/admin.py
from django.contrib import admin, messages

from .models import Agendamento, TransicaoInvalida
from .webhooks import disparar_webhook_agendamento


@admin.register(Agendamento)
class AgendamentoAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "data",
        "hora",
        "cliente_nome",
        "cliente_telefone",
        "servico_display",
        "status",
        "status_pagamento",
        "created_at",
    )
    list_filter = (
        "status",
        "status_pagamento",
        "servico",
        ("data", admin.DateFieldListFilter),
    )
    search_fields = ("cliente_nome", "cliente_telefone", "servico_nome", "servico__nome", "observacoes")
    ordering = ("-data", "-hora")
    date_hierarchy = "data"
    list_per_page = 50

    # painel só muda status/pagamento ou exclui: data, hora e serviço não se editam aqui
    readonly_fields = ("servico", "servico_nome", "data", "hora", "created_at", "updated_at")
    fieldsets = (
        ("Cliente", {"fields": (("cliente_nome", "cliente_telefone"),)}),
        ("Serviço", {"fields": (("servico", "servico_nome"),)}),
        ("Agenda & status", {"fields": (("data", "hora"), ("status", "status_pagamento"))}),
        ("Observações", {"fields": ("observacoes",)}),
        ("Metadados", {"classes": ("collapse",), "fields": (("created_at", "updated_at"),)}),
    )

    actions = [
        "action_confirmar",
        "action_cancelar",
        "action_concluir",
        "action_marcar_pago",
        "action_reembolsar",
    ]

    def has_add_permission(self, request):
        # reservas nascem pelo site, que revalida o horário antes de gravar
        return False

    @admin.display(description="Serviço")
    def servico_display(self, obj: Agendamento):
        return obj.servico_label

    # ---------- Helpers internos ----------
    def _aplicar(self, request, queryset, metodo: str, rotulo: str):
        ok, fail = 0, 0
        for ag in queryset.select_related("servico"):
            try:
                getattr(ag, metodo)()
                ok += 1
                disparar_webhook_agendamento(ag, evento="agendamento_atualizado", extra={"acao": metodo})
            except TransicaoInvalida as e:
                fail += 1
                self.message_user(request, str(e), level=messages.WARNING)
        if ok:
            self.message_user(request, f"{ok} agendamento(s) {rotulo}.", level=messages.SUCCESS)
        if fail:
            self.message_user(request, f"{fail} não puderam ser alterados.", level=messages.ERROR)

    # ---------- Actions ----------
    @admin.action(description="Confirmar selecionados")
    def action_confirmar(self, request, queryset):
        self._aplicar(request, queryset, "confirmar", "confirmado(s)")

    @admin.action(description="Cancelar selecionados")
    def action_cancelar(self, request, queryset):
        self._aplicar(request, queryset, "cancelar", "cancelado(s)")

    @admin.action(description="Concluir selecionados (só confirmados)")
    def action_concluir(self, request, queryset):
        self._aplicar(request, queryset, "concluir", "concluído(s)")

    @admin.action(description="Marcar pagamento como pago")
    def action_marcar_pago(self, request, queryset):
        self._aplicar(request, queryset, "marcar_pago", "marcado(s) como pago(s)")

    @admin.action(description="Reembolsar pagamento (só pagos)")
    def action_reembolsar(self, request, queryset):
        self._aplicar(request, queryset, "reembolsar", "reembolsado(s)")
